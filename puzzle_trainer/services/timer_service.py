"""Penalty-aware countdown timer.

Remaining time is recomputed from the clock on every tick instead of
decrementing a counter, so delayed or missed ticks never cause drift and a
time penalty shows up on the very next recomputation.
"""

import logging
import math
import time
from collections.abc import Callable

from puzzle_trainer.interfaces import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


def elapsed_seconds(level_start: float, now: float) -> int:
    """Whole seconds elapsed since level start (floored, never negative)."""
    return max(0, math.floor(now - level_start))


def remaining_seconds(
    level_start: float, base_limit: int, accumulated_penalty: int, now: float
) -> int:
    """Remaining whole seconds for a level, clamped at 0.

    Args:
        level_start: Clock reading when the level started
        base_limit: Level time limit in seconds
        accumulated_penalty: Penalty seconds added by wrong answers
        now: Current clock reading

    Returns:
        max(0, base_limit - elapsed - accumulated_penalty)
    """
    return max(0, base_limit - elapsed_seconds(level_start, now) - accumulated_penalty)


class PenaltyTimer:
    """Countdown for one level at a time, ticking through a Scheduler.

    Each tick recomputes and publishes the remaining time. When it reaches 0
    the expiry callback fires exactly once and the tick task is cancelled.
    After cancel() no callback fires again until the next start().
    """

    def __init__(
        self,
        scheduler: Scheduler,
        clock: Callable[[], float] = time.monotonic,
        interval: float = 1.0,
    ):
        """Initialize the timer.

        Args:
            scheduler: Scheduler used for the repeating tick
            clock: Time source in seconds (must match the scheduler's notion of time)
            interval: Nominal tick period in seconds
        """
        self.scheduler = scheduler
        self.clock = clock
        self.interval = interval
        self._task: ScheduledTask | None = None
        self._running = False
        self._expired = False
        self._level_start = 0.0
        self._base_limit = 0
        self._penalty_source: Callable[[], int] = lambda: 0
        self._on_tick: Callable[[int], None] | None = None
        self._on_expire: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        """Check if the timer is counting down."""
        return self._running

    @property
    def expired(self) -> bool:
        """Check if the current countdown reached 0."""
        return self._expired

    def start(
        self,
        level_start: float,
        base_limit: int,
        penalty_source: Callable[[], int],
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
    ) -> int:
        """Start counting down a level, replacing any previous countdown.

        Args:
            level_start: Clock reading when the level started
            base_limit: Level time limit in seconds
            penalty_source: Returns the current accumulated penalty seconds
            on_tick: Receives the remaining seconds on every tick
            on_expire: Called once when remaining time reaches 0

        Returns:
            Remaining seconds at start
        """
        self.cancel()
        self._level_start = level_start
        self._base_limit = base_limit
        self._penalty_source = penalty_source
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._expired = False
        self._running = True
        self._task = self.scheduler.schedule_repeating(self.interval, self.check)
        logger.debug(f"Timer started: {base_limit}s limit")
        return self.check()

    def remaining(self) -> int:
        """Recompute remaining seconds without publishing."""
        if self._expired:
            return 0
        return remaining_seconds(
            self._level_start, self._base_limit, self._penalty_source(), self.clock()
        )

    def elapsed(self) -> int:
        """Whole seconds since the current level started."""
        return elapsed_seconds(self._level_start, self.clock())

    def check(self) -> int:
        """Recompute and publish remaining time; expire if it reached 0.

        Safe to call at any time; does nothing once cancelled or expired.

        Returns:
            Remaining seconds
        """
        if not self._running:
            return 0 if self._expired else self.remaining()

        remaining = self.remaining()
        if self._on_tick:
            self._on_tick(remaining)
        if remaining == 0:
            self._expire()
        return remaining

    def cancel(self) -> None:
        """Stop ticking. Cancelling a stopped timer is a no-op."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
            logger.debug("Timer cancelled")
        self._running = False

    def release(self) -> None:
        """Cancel and drop the level's callbacks and penalty source."""
        self.cancel()
        self._penalty_source = lambda: 0
        self._on_tick = None
        self._on_expire = None

    def _expire(self) -> None:
        if self._expired:
            return
        self._expired = True
        self.cancel()
        if self._on_expire:
            self._on_expire()
