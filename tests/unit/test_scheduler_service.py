"""Tests for the cooperative scheduler."""

from unittest.mock import MagicMock

import pytest


class TestCooperativeScheduler:
    """Tests for CooperativeScheduler."""

    def test_rejects_non_positive_interval(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.schedule_repeating(0, MagicMock())

    def test_not_due_yet(self, scheduler, clock):
        callback = MagicMock()
        scheduler.schedule_repeating(1.0, callback)

        clock.advance(0.5)

        assert scheduler.run_pending() == 0
        callback.assert_not_called()

    def test_runs_when_due(self, scheduler, clock):
        callback = MagicMock()
        scheduler.schedule_repeating(1.0, callback)

        clock.advance(1.0)
        scheduler.run_pending()
        clock.advance(1.0)
        scheduler.run_pending()

        assert callback.call_count == 2

    def test_missed_ticks_coalesce(self, scheduler, clock):
        callback = MagicMock()
        scheduler.schedule_repeating(1.0, callback)

        clock.advance(10)

        assert scheduler.run_pending() == 1
        assert scheduler.next_due() == clock() + 1.0

    def test_cancelled_task_never_runs(self, scheduler, clock):
        callback = MagicMock()
        task = scheduler.schedule_repeating(1.0, callback)

        task.cancel()
        task.cancel()
        clock.advance(5)
        scheduler.run_pending()

        callback.assert_not_called()
        assert not task.active
        assert scheduler.pending_count == 0
        assert scheduler.next_due() is None

    def test_callback_may_cancel_its_own_task(self, scheduler, clock):
        calls = []

        def tick():
            calls.append(clock())
            task.cancel()

        task = scheduler.schedule_repeating(1.0, tick)
        clock.advance(1)
        scheduler.run_pending()
        clock.advance(1)
        scheduler.run_pending()

        assert len(calls) == 1
