"""Presenter protocol for output abstraction."""

from typing import Protocol

from puzzle_trainer.models import LevelReward, Puzzle, SessionReport, Stage


class GamePresenter(Protocol):
    """Interface for presenting game output to the player (CLI, GUI, etc).

    The level controller publishes every state change through this protocol,
    so the same engine drives any presentation layer.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_stage(self, stage: Stage) -> None:
        """Announce a lifecycle stage change.

        Args:
            stage: The stage just entered
        """
        ...

    def show_puzzle(self, puzzle: Puzzle, level_count: int) -> None:
        """Display a freshly generated puzzle.

        Args:
            puzzle: Puzzle for the current level
            level_count: Number of levels in the tier
        """
        ...

    def show_remaining(self, seconds: int) -> None:
        """Display the remaining time for the current level.

        Args:
            seconds: Remaining whole seconds (>= 0)
        """
        ...

    def show_penalty(self, penalty_seconds: int, remaining: int) -> None:
        """Signal a wrong answer and the time it cost.

        Args:
            penalty_seconds: Seconds deducted for this wrong answer
            remaining: Remaining time after the deduction
        """
        ...

    def show_level_reward(self, reward: LevelReward) -> None:
        """Display the reward earned for a completed level.

        Args:
            reward: The recorded level result
        """
        ...

    def show_time_up(self, level: int) -> None:
        """Signal that the clock ran out on a level.

        Args:
            level: The abandoned level
        """
        ...

    def show_report(self, report: SessionReport) -> None:
        """Display the end-of-session report.

        Args:
            report: The session summary
        """
        ...
