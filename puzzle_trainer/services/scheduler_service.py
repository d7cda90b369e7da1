"""Cooperative single-threaded scheduler for repeating callbacks."""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class CooperativeTask:
    """A repeating callback owned by a CooperativeScheduler."""

    def __init__(self, interval: float, callback: Callable[[], None], next_due: float):
        self.interval = interval
        self.callback = callback
        self.next_due = next_due
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop the task (no-op if already cancelled)."""
        self._active = False


class CooperativeScheduler:
    """Scheduler driven by explicit run_pending() calls from the host loop.

    Nothing runs in the background: due callbacks fire only inside
    run_pending(). A task that missed several periods (e.g. the host was
    blocked waiting for input) fires once, then is rescheduled one interval
    from now.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Initialize the scheduler.

        Args:
            clock: Monotonic time source in seconds
        """
        self.clock = clock
        self._tasks: list[CooperativeTask] = []

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> CooperativeTask:
        """Run callback every interval seconds until cancelled."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        task = CooperativeTask(interval, callback, self.clock() + interval)
        self._tasks.append(task)
        return task

    def run_pending(self) -> int:
        """Run every active task whose due time has passed.

        Returns:
            Number of callbacks run
        """
        now = self.clock()
        ran = 0
        for task in list(self._tasks):
            if not task.active or task.next_due > now:
                continue
            task.next_due = now + task.interval
            task.callback()
            ran += 1
        self._tasks = [t for t in self._tasks if t.active]
        return ran

    def next_due(self) -> float | None:
        """Earliest due time among active tasks, or None if idle."""
        due = [t.next_due for t in self._tasks if t.active]
        return min(due) if due else None

    @property
    def pending_count(self) -> int:
        """Number of active tasks."""
        return sum(1 for t in self._tasks if t.active)
