"""Protocols for repeating scheduled callbacks."""

from collections.abc import Callable
from typing import Protocol


class ScheduledTask(Protocol):
    """Handle to a repeating callback. Cancelling is a single explicit call."""

    @property
    def active(self) -> bool:
        """Check if the task will still fire."""
        ...

    def cancel(self) -> None:
        """Stop the task. Cancelling an already-cancelled task is a no-op."""
        ...


class Scheduler(Protocol):
    """Interface for scheduling repeating callbacks.

    Implementations must never run two callbacks of the same task
    concurrently: each tick completes before the next one is scheduled.
    """

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run callback every interval seconds until cancelled.

        Args:
            interval: Period in seconds
            callback: Function to call on each tick

        Returns:
            Handle used to cancel the task
        """
        ...
