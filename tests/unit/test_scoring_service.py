"""Tests for reward and total score calculation."""

import pytest

from puzzle_trainer.models import LevelReward
from puzzle_trainer.services import level_reward, penalty_factor, total_score
from puzzle_trainer.services.scoring_service import round_score, time_spent_seconds


class TestLevelReward:
    """Tests for level_reward."""

    def test_level_one_one_second_no_mistakes(self, grid_easy_tier):
        assert level_reward(1, grid_easy_tier, 1, 0) == 1.00

    def test_one_wrong_answer_scales_by_fraction(self, grid_easy_tier):
        assert level_reward(1, grid_easy_tier, 1, 1) == 0.80

    def test_level_two_four_seconds(self, grid_easy_tier):
        assert level_reward(2, grid_easy_tier, 4, 0) == 1.00
        assert level_reward(2, grid_easy_tier, 4, 1) == 0.80

    def test_many_wrong_answers_floor_at_ten_percent(self, grid_easy_tier):
        assert level_reward(1, grid_easy_tier, 1, 10) == 0.10
        assert level_reward(1, grid_easy_tier, 1, 100) == 0.10

    def test_multiplier_and_level_squared(self, code_medium_tier):
        # 1^2 * 1.5 / 5
        assert level_reward(1, code_medium_tier, 5, 0) == 0.30
        # 3^2 * 1.5 / 9
        assert level_reward(3, code_medium_tier, 9, 0) == 1.50

    def test_zero_time_treated_as_one_second(self, grid_easy_tier):
        assert level_reward(2, grid_easy_tier, 0, 0) == 4.00

    def test_rounds_to_two_places(self, grid_easy_tier):
        assert level_reward(2, grid_easy_tier, 3, 0) == 1.33

    def test_never_negative(self, code_medium_tier):
        for wrong in range(0, 20):
            assert level_reward(1, code_medium_tier, 100, wrong) >= 0


class TestPenaltyFactor:
    def test_no_wrong_answers(self, grid_easy_tier):
        assert penalty_factor(0, grid_easy_tier) == 1.0

    def test_floor(self, grid_easy_tier):
        assert penalty_factor(6, grid_easy_tier) == 0.1

    @pytest.mark.parametrize("wrong", range(0, 12))
    def test_bounds(self, grid_easy_tier, wrong):
        assert 0.1 <= penalty_factor(wrong, grid_easy_tier) <= 1.0


class TestRounding:
    def test_half_rounds_up(self):
        assert round_score(0.125) == 0.13

    def test_time_spent_includes_penalty(self):
        assert time_spent_seconds(10, 16) == 26
        assert time_spent_seconds(0, 0) == 1


class TestTotalScore:
    def test_sum_of_rewards(self):
        rewards = [
            LevelReward(level=1, time_spent=5, wrong_answers=0, reward=0.3),
            LevelReward(level=2, time_spent=4, wrong_answers=1, reward=1.28),
            LevelReward(level=3, time_spent=9, wrong_answers=0, reward=1.5),
        ]
        assert total_score(rewards) == 3.08

    def test_empty(self):
        assert total_score([]) == 0.0
