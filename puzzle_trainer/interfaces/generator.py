"""Protocol for puzzle generators."""

from typing import Protocol

from puzzle_trainer.models import DifficultyTier, Puzzle, PuzzleFamily


class PuzzleGenerator(Protocol):
    """Interface for a puzzle family's generation strategy.

    Any puzzle type (Latin-square grids, permutation codes, new families)
    implements this protocol to plug into the level controller.
    """

    @property
    def family(self) -> PuzzleFamily:
        """Puzzle family this generator produces."""
        ...

    def generate(self, tier: DifficultyTier, level: int, seed: int | None = None) -> Puzzle:
        """Generate a puzzle for a tier and 1-indexed level.

        Args:
            tier: Difficulty tier of the session
            level: Level number (1-indexed)
            seed: Optional seed; a fixed seed gives a deterministic puzzle

        Returns:
            A puzzle with exactly one correct candidate for its target

        Raises:
            GenerationError: If no valid puzzle can be produced
        """
        ...
