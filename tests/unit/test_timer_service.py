"""Tests for the penalty-aware countdown timer."""

from unittest.mock import MagicMock

import pytest

from puzzle_trainer.services import PenaltyTimer, remaining_seconds
from puzzle_trainer.services.timer_service import elapsed_seconds


class TestRemainingSeconds:
    """Tests for the pure remaining-time function."""

    def test_no_elapsed_no_penalty(self):
        assert remaining_seconds(100.0, 60, 0, 100.0) == 60

    def test_elapsed_is_floored(self):
        assert remaining_seconds(100.0, 60, 0, 103.9) == 57

    def test_penalty_subtracted(self):
        assert remaining_seconds(100.0, 60, 16, 110.0) == 34

    def test_clamped_at_zero(self):
        assert remaining_seconds(100.0, 60, 50, 120.0) == 0

    def test_clock_before_start(self):
        assert elapsed_seconds(100.0, 99.0) == 0


class TestPenaltyTimer:
    """Tests for PenaltyTimer ticking and expiry."""

    @pytest.fixture
    def penalty(self):
        return {"seconds": 0}

    @pytest.fixture
    def timer(self, scheduler, clock):
        return PenaltyTimer(scheduler, clock, interval=1.0)

    def _start(self, timer, clock, penalty, limit=30, on_tick=None, on_expire=None):
        return timer.start(
            clock(),
            limit,
            penalty_source=lambda: penalty["seconds"],
            on_tick=on_tick,
            on_expire=on_expire,
        )

    def test_start_returns_full_limit(self, timer, clock, penalty):
        on_tick = MagicMock()
        assert self._start(timer, clock, penalty, on_tick=on_tick) == 30
        on_tick.assert_called_once_with(30)
        assert timer.running

    def test_ticks_publish_remaining(self, timer, clock, scheduler, penalty):
        on_tick = MagicMock()
        self._start(timer, clock, penalty, on_tick=on_tick)

        clock.advance(1)
        scheduler.run_pending()
        clock.advance(1)
        scheduler.run_pending()

        assert [c.args[0] for c in on_tick.call_args_list] == [30, 29, 28]

    def test_penalty_lowers_remaining_by_exact_amount(self, timer, clock, penalty):
        self._start(timer, clock, penalty)
        clock.advance(4)
        before = timer.remaining()

        penalty["seconds"] += 8

        assert timer.remaining() == before - 8

    def test_remaining_never_increases(self, timer, clock, scheduler, penalty):
        on_tick = MagicMock()
        self._start(timer, clock, penalty, limit=60, on_tick=on_tick)

        for step in range(20):
            clock.advance(0.7)
            if step % 3 == 0:
                penalty["seconds"] += 2
            scheduler.run_pending()

        published = [c.args[0] for c in on_tick.call_args_list]
        assert published == sorted(published, reverse=True)

    def test_expiry_fires_once(self, timer, clock, scheduler, penalty):
        on_expire = MagicMock()
        self._start(timer, clock, penalty, limit=3, on_expire=on_expire)

        for _ in range(10):
            clock.advance(1)
            scheduler.run_pending()

        on_expire.assert_called_once()
        assert timer.expired
        assert not timer.running
        assert timer.remaining() == 0
        assert scheduler.pending_count == 0

    def test_penalty_can_expire_on_next_check(self, timer, clock, penalty):
        on_expire = MagicMock()
        self._start(timer, clock, penalty, limit=10, on_expire=on_expire)

        penalty["seconds"] = 10
        assert timer.check() == 0

        on_expire.assert_called_once()

    def test_cancel_is_idempotent(self, timer, clock, penalty):
        self._start(timer, clock, penalty)
        timer.cancel()
        timer.cancel()
        assert not timer.running

    def test_no_callbacks_after_cancel(self, timer, clock, scheduler, penalty):
        on_tick = MagicMock()
        on_expire = MagicMock()
        self._start(timer, clock, penalty, limit=2, on_tick=on_tick, on_expire=on_expire)
        on_tick.reset_mock()

        timer.cancel()
        clock.advance(5)
        scheduler.run_pending()
        timer.check()

        on_tick.assert_not_called()
        on_expire.assert_not_called()

    def test_release_drops_callbacks_and_penalty(self, timer, clock, penalty):
        on_tick = MagicMock()
        self._start(timer, clock, penalty, limit=30, on_tick=on_tick)
        penalty["seconds"] = 10

        timer.release()

        assert not timer.running
        assert timer._on_tick is None
        assert timer._on_expire is None
        assert timer.remaining() == 30

    def test_restart_replaces_previous_countdown(self, timer, clock, scheduler, penalty):
        first_expire = MagicMock()
        self._start(timer, clock, penalty, limit=2, on_expire=first_expire)

        clock.advance(1)
        self._start(timer, clock, penalty, limit=10)
        clock.advance(3)
        scheduler.run_pending()

        first_expire.assert_not_called()
        assert scheduler.pending_count == 1
        assert timer.remaining() == 7

    def test_restart_after_expiry(self, timer, clock, penalty):
        self._start(timer, clock, penalty, limit=1)
        clock.advance(1)
        timer.check()
        assert timer.expired

        assert self._start(timer, clock, penalty, limit=5) == 5
        assert not timer.expired
