"""Configuration classes for Puzzle Trainer."""

from dataclasses import dataclass

from puzzle_trainer.models import Difficulty

from .catalogue import get_game


@dataclass(frozen=True)
class TrainerConfig:
    """Immutable host configuration for a puzzle session.

    Only runtime settings live here. Difficulty tiers, time limits and
    penalty rates are compiled-in constants (see tiers.py).
    """

    # Game selection
    game_id: str = "geo-sudo"
    difficulty: str = "medium"
    show_instructions: bool = False

    # Timer settings
    tick_interval: float = 1.0  # Seconds between timer ticks

    # Session settings
    preview_mode: bool = False  # Practice run: never report a score
    rng_seed: int | None = None  # Fixed seed for reproducible puzzles

    def __post_init__(self):
        """Validate settings."""
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        # Normalize difficulty name (raises ValueError if unknown)
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty).value)
        get_game(self.game_id)
