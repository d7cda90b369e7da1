"""Data models for difficulty tiers and per-level parameters."""

from dataclasses import dataclass
from enum import Enum


class Difficulty(Enum):
    """Difficulty settings offered at the configuration stage."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        """Resolve a difficulty from its name (case-insensitive) or return it unchanged."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty '{value}' (expected one of: {valid})") from None


class PuzzleFamily(Enum):
    """Puzzle families the engine knows how to generate."""

    GRID = "grid"  # Latin-square shape grid
    CODE = "code"  # Permutation-code switch


@dataclass(frozen=True)
class DifficultyTier:
    """Immutable bundle of level count, score multiplier and penalty rates.

    Grid-only settings (hidden_fraction, grid_sizes) are left at their
    defaults for the code family.
    """

    difficulty: Difficulty
    family: PuzzleFamily
    level_count: int
    score_multiplier: float
    time_penalty_seconds: int
    score_penalty_fraction: float
    hidden_fraction: float = 0.0
    grid_sizes: tuple[int, ...] = ()

    def __post_init__(self):
        if self.level_count < 1:
            raise ValueError("level_count must be at least 1")
        if self.score_multiplier < 1:
            raise ValueError("score_multiplier must be >= 1")
        if self.time_penalty_seconds < 0:
            raise ValueError("time_penalty_seconds must not be negative")
        if not 0 < self.score_penalty_fraction < 1:
            raise ValueError("score_penalty_fraction must be between 0 and 1 (exclusive)")
        if not 0 <= self.hidden_fraction < 1:
            raise ValueError("hidden_fraction must be in [0, 1)")

    @property
    def name(self) -> str:
        """Difficulty name (e.g., 'medium')."""
        return self.difficulty.value

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.level_count} levels, x{self.score_multiplier:g}, "
            f"-{self.time_penalty_seconds}s / -{self.score_penalty_fraction:.0%} per wrong answer)"
        )


@dataclass(frozen=True)
class LevelSpec:
    """Per-(tier, level) parameters."""

    level: int
    size: int  # Grid dimension, or code length
    time_limit_seconds: int
    codes: tuple[str, ...] = ()  # Candidate codes (code family only)
