"""Custom exceptions for Puzzle Trainer."""

from .base import PuzzleTrainerException
from .generation import GenerationError
from .session import InvalidSubmission, StageTransitionError

__all__ = [
    "PuzzleTrainerException",
    "GenerationError",
    "InvalidSubmission",
    "StageTransitionError",
]
