"""Data model for the end-of-session report."""

from dataclasses import dataclass

from .session import LevelReward, SessionOutcome
from .tier import Difficulty, PuzzleFamily


@dataclass(frozen=True)
class SessionReport:
    """Read-only summary shown at the report stage.

    level_rewards is the sole source of truth; total_score is derived from it.
    """

    family: PuzzleFamily
    difficulty: Difficulty
    level_count: int
    level_rewards: tuple[LevelReward, ...]
    total_score: float
    outcome: SessionOutcome
    highest_level: int
    total_time_taken: int
    player_id: object = None

    @property
    def levels_completed(self) -> int:
        return len(self.level_rewards)

    @property
    def total_wrong_answers(self) -> int:
        return sum(r.wrong_answers for r in self.level_rewards)

    @property
    def average_time_per_level(self) -> float:
        """Average seconds spent per completed level (0.0 if none completed)."""
        if not self.level_rewards:
            return 0.0
        return sum(r.time_spent for r in self.level_rewards) / len(self.level_rewards)

    @property
    def all_levels_completed(self) -> bool:
        return self.levels_completed == self.level_count

    def __str__(self) -> str:
        return (
            f"SessionReport({self.difficulty.value}, {self.outcome.value}, "
            f"levels={self.levels_completed}/{self.level_count}, score={self.total_score:.2f})"
        )
