"""Pytest configuration and shared fixtures."""

import os

# Headless environments have no display; let Qt render offscreen.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from unittest.mock import MagicMock

import pytest

from puzzle_trainer.config import create_default_config, get_tier
from puzzle_trainer.models import Difficulty, PuzzleFamily
from puzzle_trainer.orchestration import LevelController
from puzzle_trainer.presenters import NullPresenter
from puzzle_trainer.services import CooperativeScheduler, create_generator


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingPresenter:
    """Presenter that records every call as (method name, args)."""

    def __init__(self):
        self.events = []

    def _record(self, name, *args):
        self.events.append((name, args))

    def calls(self, name):
        """Arguments of every call to the named method."""
        return [args for event, args in self.events if event == name]

    def show_info(self, message):
        self._record("show_info", message)

    def show_warning(self, message):
        self._record("show_warning", message)

    def show_error(self, message):
        self._record("show_error", message)

    def show_stage(self, stage):
        self._record("show_stage", stage)

    def show_puzzle(self, puzzle, level_count):
        self._record("show_puzzle", puzzle, level_count)

    def show_remaining(self, seconds):
        self._record("show_remaining", seconds)

    def show_penalty(self, penalty_seconds, remaining):
        self._record("show_penalty", penalty_seconds, remaining)

    def show_level_reward(self, reward):
        self._record("show_level_reward", reward)

    def show_time_up(self, level):
        self._record("show_time_up", level)

    def show_report(self, report):
        self._record("show_report", report)


@pytest.fixture
def clock():
    """Provide a fake clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    """Provide a cooperative scheduler driven by the fake clock."""
    return CooperativeScheduler(clock)


@pytest.fixture
def recording_presenter():
    return RecordingPresenter()


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def on_complete():
    """Provide a mock completion callback."""
    return MagicMock()


@pytest.fixture
def grid_easy_tier():
    return get_tier(PuzzleFamily.GRID, Difficulty.EASY)


@pytest.fixture
def code_medium_tier():
    return get_tier(PuzzleFamily.CODE, Difficulty.MEDIUM)


@pytest.fixture
def make_controller(clock, scheduler, recording_presenter, on_complete):
    """Factory fixture for LevelController instances on the fake clock."""

    def _make(
        game_id="switch",
        difficulty="medium",
        generator=None,
        player_id=None,
        **config_overrides,
    ):
        config = create_default_config(
            game_id=game_id, difficulty=difficulty, rng_seed=1234, **config_overrides
        )
        if generator is None:
            family = PuzzleFamily.CODE if game_id == "switch" else PuzzleFamily.GRID
            generator = create_generator(family)
        return LevelController(
            generator=generator,
            presenter=recording_presenter,
            scheduler=scheduler,
            config=config,
            on_complete=on_complete,
            player_id=player_id,
            clock=clock,
        )

    return _make

