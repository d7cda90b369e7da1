"""Puzzle generation exceptions."""

from .base import PuzzleTrainerException


class GenerationError(PuzzleTrainerException):
    """Raised when a generator cannot produce a valid puzzle.

    The level controller treats this as fatal for the current session only:
    the session is routed to the report stage with the levels already completed.
    """

    pass
