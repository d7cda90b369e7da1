"""Base exception classes for Puzzle Trainer."""


class PuzzleTrainerException(Exception):
    """Base exception for all Puzzle Trainer errors.

    All custom exceptions in the puzzle_trainer package should inherit
    from this base class for consistent error handling.
    """

    pass
