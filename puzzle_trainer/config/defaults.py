"""Default configuration values for Puzzle Trainer."""

from .config import TrainerConfig


def create_default_config(**overrides) -> TrainerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        TrainerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            game_id="switch",
            difficulty="hard",
        )
    """
    return TrainerConfig(**overrides)
