"""Level reward and total score calculation."""

import math
from collections.abc import Iterable

from puzzle_trainer.models import DifficultyTier, LevelReward

# A level keeps at least this fraction of its reward regardless of wrong answers
MIN_PENALTY_FACTOR = 0.1


def round_score(value: float) -> float:
    """Round to 2 decimal places, halves away from zero for positive values."""
    return math.floor(value * 100 + 0.5) / 100


def penalty_factor(wrong_answers: int, tier: DifficultyTier) -> float:
    """Fraction of the raw reward kept after wrong answers (never below 0.1)."""
    if wrong_answers <= 0:
        return 1.0
    return max(MIN_PENALTY_FACTOR, 1 - wrong_answers * tier.score_penalty_fraction)


def level_reward(
    level: int, tier: DifficultyTier, time_spent_seconds: int, wrong_answers: int
) -> float:
    """Compute the reward for a completed level.

    reward = (level^2 * multiplier) / max(1, time_spent), scaled down by
    the wrong-answer penalty factor, rounded to 2 decimal places.

    Args:
        level: Completed level (1-indexed)
        tier: Difficulty tier of the session
        time_spent_seconds: Seconds spent on the level, including penalties
        wrong_answers: Wrong submissions made on the level

    Returns:
        Rounded level reward
    """
    raw = (level * level * tier.score_multiplier) / max(1, time_spent_seconds)
    return round_score(raw * penalty_factor(wrong_answers, tier))


def time_spent_seconds(elapsed_seconds: int, accumulated_penalty_seconds: int) -> int:
    """Seconds charged for a level: elapsed wall time plus penalties, at least 1."""
    return max(1, elapsed_seconds + accumulated_penalty_seconds)


def total_score(level_rewards: Iterable[LevelReward]) -> float:
    """Sum of recorded level rewards, rounded to 2 decimal places."""
    return round_score(sum(r.reward for r in level_rewards))
