"""Scheduler backed by QTimer for the GUI event loop."""

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class QtScheduledTask:
    """Handle to a repeating QTimer."""

    def __init__(self, timer: QTimer):
        self._timer = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        """Stop and release the timer (no-op if already cancelled)."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler:
    """Run repeating callbacks on the Qt event loop.

    Ticks are delivered on the GUI thread, so a callback never overlaps
    the next one and may touch widgets directly.
    """

    def __init__(self, parent: QObject | None = None):
        """Initialize the scheduler.

        Args:
            parent: Optional QObject owning the timers
        """
        self.parent = parent

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> QtScheduledTask:
        """Run callback every interval seconds until cancelled."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        timer = QTimer(self.parent)
        timer.setInterval(max(1, int(interval * 1000)))
        timer.timeout.connect(callback)
        timer.start()
        logger.debug(f"QTimer started ({timer.interval()}ms)")
        return QtScheduledTask(timer)
