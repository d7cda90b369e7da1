"""Latin-square shape grid puzzle generator."""

import logging
import random

from puzzle_trainer.config.tiers import SHAPES, level_spec
from puzzle_trainer.exceptions import GenerationError
from puzzle_trainer.models import DifficultyTier, GridPuzzle, Position, PuzzleFamily

logger = logging.getLogger(__name__)

# Canonical Latin squares as symbol indices, one per supported grid size
CANONICAL_PATTERNS: dict[int, tuple[tuple[int, ...], ...]] = {
    4: (
        (0, 1, 2, 3),
        (2, 3, 0, 1),
        (1, 0, 3, 2),
        (3, 2, 1, 0),
    ),
    5: (
        (0, 1, 2, 3, 4),
        (4, 0, 1, 2, 3),
        (3, 4, 0, 1, 2),
        (2, 3, 4, 0, 1),
        (1, 2, 3, 4, 0),
    ),
    6: (
        (0, 1, 2, 3, 4, 5),
        (5, 0, 1, 2, 3, 4),
        (4, 5, 0, 1, 2, 3),
        (3, 4, 5, 0, 1, 2),
        (2, 3, 4, 5, 0, 1),
        (1, 2, 3, 4, 5, 0),
    ),
}


def is_latin_square(grid) -> bool:
    """Check that every row and every column holds each symbol exactly once."""
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid):
        return False
    symbols = set(grid[0])
    if len(symbols) != size:
        return False
    for row in grid:
        if set(row) != symbols:
            return False
    for col in range(size):
        if {grid[row][col] for row in range(size)} != symbols:
            return False
    return True


class LatinSquareGenerator:
    """Generate shape-grid puzzles from shuffled canonical Latin squares.

    Rows of the canonical square are permuted, then columns; both
    permutations preserve the Latin-square property. A difficulty-dependent
    fraction of cells is then hidden and one hidden cell becomes the target.
    """

    def __init__(
        self,
        symbols: tuple[str, ...] = SHAPES,
        patterns: dict[int, tuple[tuple[int, ...], ...]] | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize the generator.

        Args:
            symbols: Symbol pool; a grid of size n uses the first n symbols
            patterns: Canonical patterns by size (defaults to CANONICAL_PATTERNS)
            rng: Random source used when no seed is given
        """
        self.symbols = tuple(symbols)
        self.patterns = CANONICAL_PATTERNS if patterns is None else patterns
        self._rng = rng or random.Random()

    @property
    def family(self) -> PuzzleFamily:
        return PuzzleFamily.GRID

    def canonical_grid(self, size: int) -> tuple[tuple[str, ...], ...]:
        """Build the canonical solved grid for a size.

        Raises:
            GenerationError: If no valid pattern or too few symbols exist for the size
        """
        pattern = self.patterns.get(size)
        if pattern is None:
            raise GenerationError(f"No canonical pattern available for a {size}x{size} grid")
        if len(self.symbols) < size:
            raise GenerationError(
                f"{size}x{size} grid needs {size} symbols, only {len(self.symbols)} available"
            )
        grid = tuple(tuple(self.symbols[i] for i in row) for row in pattern)
        if not is_latin_square(grid):
            raise GenerationError(f"Canonical pattern for size {size} is not a Latin square")
        return grid

    def shuffle_grid(
        self, grid: tuple[tuple[str, ...], ...], rng: random.Random
    ) -> tuple[tuple[str, ...], ...]:
        """Permute rows, then columns."""
        rows = list(grid)
        rng.shuffle(rows)
        columns = list(range(len(grid)))
        rng.shuffle(columns)
        return tuple(tuple(row[c] for c in columns) for row in rows)

    def choose_hidden(self, size: int, fraction: float, rng: random.Random) -> list[Position]:
        """Pick cells to hide uniformly at random without replacement (at least one)."""
        count = max(1, int(size * size * fraction))
        cells = [(r, c) for r in range(size) for c in range(size)]
        return rng.sample(cells, count)

    def generate(self, tier: DifficultyTier, level: int, seed: int | None = None) -> GridPuzzle:
        """Generate a grid puzzle for a tier and level.

        Args:
            tier: Grid-family difficulty tier
            level: Level number (1-indexed)
            seed: Optional seed for a deterministic puzzle

        Returns:
            GridPuzzle whose target has exactly one correct candidate

        Raises:
            GenerationError: If the tier or level cannot produce a valid grid
        """
        if tier.family is not PuzzleFamily.GRID:
            raise GenerationError(f"Tier '{tier.name}' belongs to the {tier.family.value} family")

        try:
            spec = level_spec(tier, level)
        except ValueError as e:
            raise GenerationError(str(e)) from e

        rng = random.Random(seed) if seed is not None else self._rng
        solution = self.shuffle_grid(self.canonical_grid(spec.size), rng)
        if not is_latin_square(solution):
            raise GenerationError("Shuffled grid lost the Latin-square property")

        hidden = self.choose_hidden(spec.size, tier.hidden_fraction, rng)
        target = rng.choice(hidden)
        answer = solution[target[0]][target[1]]

        present = {symbol for row in solution for symbol in row}
        candidates = tuple(s for s in self.symbols if s in present)
        if candidates.count(answer) != 1:
            raise GenerationError(f"Target {target} has no unique correct candidate")

        logger.debug(
            f"Generated {spec.size}x{spec.size} grid for {tier.name} level {level}: "
            f"{len(hidden)} hidden, target {target}"
        )

        return GridPuzzle(
            family=PuzzleFamily.GRID,
            difficulty=tier.difficulty,
            level=level,
            time_limit_seconds=spec.time_limit_seconds,
            target=target,
            unknowns=tuple(hidden),
            answer=answer,
            candidates=candidates,
            solution=solution,
        )
