"""Integration tests for complete sessions with real generators, timer and scoring."""

from unittest.mock import MagicMock

import pytest

from puzzle_trainer.config import create_default_config
from puzzle_trainer.models import SessionOutcome, Stage, SubmissionOutcome
from puzzle_trainer.orchestration import LevelController
from puzzle_trainer.presenters import NullPresenter
from puzzle_trainer.services import CooperativeScheduler, create_generator_for_game
from puzzle_trainer.services.grid_generator import is_latin_square


class TestGameSession:
    """End-to-end sessions on a fake clock."""

    @pytest.fixture
    def build(self, clock):
        def _build(game_id, difficulty, **overrides):
            config = create_default_config(game_id=game_id, difficulty=difficulty, **overrides)
            on_complete = MagicMock()
            controller = LevelController(
                generator=create_generator_for_game(game_id, seed=2024),
                presenter=NullPresenter(),
                scheduler=CooperativeScheduler(clock),
                config=config,
                on_complete=on_complete,
                clock=clock,
            )
            return controller, on_complete

        return _build

    def test_medium_switch_first_level(self, build, clock):
        """A correct answer after 5 seconds earns 0.30 and advances to level 2."""
        controller, _ = build("switch", "medium")
        controller.configure()

        clock.advance(5)
        outcome = controller.submit(controller.puzzle.answer)

        assert outcome is SubmissionOutcome.CORRECT
        assert controller.session.level_rewards[0].reward == 0.30
        assert controller.session.level == 2

    def test_grid_session_to_completion(self, build, clock):
        controller, on_complete = build("geo-sudo", "easy", show_instructions=True)
        assert controller.configure() is Stage.INSTRUCTIONS
        controller.acknowledge_instructions()
        controller.start()

        sizes = []
        while controller.stage is Stage.PLAY:
            puzzle = controller.puzzle
            assert is_latin_square(puzzle.solution)
            sizes.append(puzzle.size)
            clock.advance(10)
            controller.poll()
            controller.submit(puzzle.answer)

        report = controller.finish()

        assert sizes == [4, 4, 4, 4, 4]
        assert report.outcome is SessionOutcome.COMPLETED
        # sum(level^2) / 10 for levels 1..5
        assert report.total_score == 5.5
        assert report.total_time_taken == 50
        on_complete.assert_called_once_with(5.5, 50)

    def test_expert_switch_times_out_mid_session(self, build, clock):
        controller, on_complete = build("switch", "expert")
        controller.configure()

        for _ in range(3):
            clock.advance(10)
            controller.submit(controller.puzzle.answer)
        assert controller.session.level == 4

        # Level 4 allows 45s; three wrong answers cost 45s of penalty
        wrong = next(c for c in controller.puzzle.candidates if c != controller.puzzle.answer)
        for _ in range(3):
            controller.submit(wrong)

        assert controller.stage is Stage.REPORT
        report = controller.finish()
        assert report.outcome is SessionOutcome.TIMED_OUT
        assert report.highest_level == 4
        assert report.levels_completed == 3
        # 3 * (1 + 4 + 9) / 10
        assert report.total_score == 4.2
        on_complete.assert_called_once_with(4.2, 30)

    def test_score_matches_sum_of_level_rewards(self, build, clock):
        controller, _ = build("switch", "hard")
        controller.configure()

        for seconds in (3, 7, 11, 2, 19):
            clock.advance(seconds)
            puzzle = controller.puzzle
            controller.submit(next(c for c in puzzle.candidates if c != puzzle.answer))
            controller.submit(puzzle.answer)

        report = controller.report
        assert report.levels_completed == 5
        assert report.total_score == round(sum(r.reward for r in report.level_rewards), 2)
        assert all(r.wrong_answers == 1 for r in report.level_rewards)
