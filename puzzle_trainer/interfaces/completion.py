"""Completion callback protocol for reporting final scores."""

from typing import Protocol


class CompletionCallback(Protocol):
    """Receives the final score of a finished, non-preview session.

    Invoked at most once per session, on the report -> finish transition.
    """

    def __call__(self, total_score: float, total_time_taken: int) -> None:
        """Record a finished session.

        Args:
            total_score: Sum of the session's level rewards
            total_time_taken: Whole seconds from the first level's start to finish
        """
        ...
