"""Data models for session state and level results."""

from dataclasses import dataclass, field
from enum import Enum

from .tier import DifficultyTier


class Stage(Enum):
    """Player-facing lifecycle stages."""

    CONFIG = "config"
    INSTRUCTIONS = "instructions"
    PLAY = "play"
    REPORT = "report"


class SessionOutcome(Enum):
    """How a session ended (or that it has not ended yet)."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"  # Finished every level of the tier
    TIMED_OUT = "timed_out"  # Clock ran out on a level
    ABORTED = "aborted"  # Generator failure; partial report only


class SubmissionOutcome(Enum):
    """Result of submitting an answer during play."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    EXPIRED = "expired"  # Time was already up; treated as expiry, not a late answer


@dataclass(frozen=True)
class LevelReward:
    """Immutable record of one completed level."""

    level: int
    time_spent: int  # Seconds, >= 1, includes accumulated penalty
    wrong_answers: int
    reward: float

    def __str__(self) -> str:
        return (
            f"Level {self.level}: {self.reward:.2f} pts "
            f"({self.time_spent}s, {self.wrong_answers} wrong)"
        )


@dataclass
class Session:
    """Runtime state of one play-through. Owned exclusively by the controller."""

    tier: DifficultyTier
    started_at: float
    stage: Stage = Stage.PLAY
    level: int = 1
    wrong_answers_this_level: int = 0
    accumulated_penalty_seconds: int = 0
    level_start_timestamp: float = 0.0
    total_score: float = 0.0
    level_rewards: list[LevelReward] = field(default_factory=list)
    outcome: SessionOutcome = SessionOutcome.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        """Check if the session finished all levels or timed out."""
        return self.outcome in (SessionOutcome.COMPLETED, SessionOutcome.TIMED_OUT)

    @property
    def levels_completed(self) -> int:
        return len(self.level_rewards)
