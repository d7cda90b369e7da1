"""Orchestration for coordinating generator, timer and scoring."""

from .level_controller import LevelController

__all__ = ["LevelController"]
