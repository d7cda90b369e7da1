"""Configuration management for Puzzle Trainer."""

from .catalogue import GAMES, GameInfo, get_game
from .config import TrainerConfig
from .defaults import create_default_config
from .tiers import describe_tier, get_tier, level_spec

__all__ = [
    "TrainerConfig",
    "create_default_config",
    "GAMES",
    "GameInfo",
    "get_game",
    "get_tier",
    "level_spec",
    "describe_tier",
]
