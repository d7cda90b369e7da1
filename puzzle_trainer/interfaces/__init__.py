"""Interface protocols for Puzzle Trainer."""

from .completion import CompletionCallback
from .generator import PuzzleGenerator
from .presenter import GamePresenter
from .scheduler import ScheduledTask, Scheduler

__all__ = [
    "CompletionCallback",
    "GamePresenter",
    "PuzzleGenerator",
    "ScheduledTask",
    "Scheduler",
]
