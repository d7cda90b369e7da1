"""Permutation-code (switch) puzzle generator."""

import logging
import random

from puzzle_trainer.config.tiers import CODE_LENGTH, level_spec
from puzzle_trainer.exceptions import GenerationError
from puzzle_trainer.models import CodePuzzle, DifficultyTier, PuzzleFamily

logger = logging.getLogger(__name__)

INPUT_ORDER: tuple[int, ...] = tuple(range(1, CODE_LENGTH + 1))


def is_permutation_code(code: str, length: int = CODE_LENGTH) -> bool:
    """Check that a code is a bijective reordering of positions 1..length."""
    return sorted(code) == [str(i) for i in range(1, length + 1)]


class PermutationCodeGenerator:
    """Generate switch puzzles from the level's catalogue of codes.

    The input order is fixed; a randomly chosen code is applied to it and
    the player picks, from the level's candidate codes, the one that maps
    the shown input to the shown output.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize the generator.

        Args:
            rng: Random source used when no seed is given
        """
        self._rng = rng or random.Random()

    @property
    def family(self) -> PuzzleFamily:
        return PuzzleFamily.CODE

    def generate(self, tier: DifficultyTier, level: int, seed: int | None = None) -> CodePuzzle:
        """Generate a switch puzzle for a tier and level.

        Args:
            tier: Code-family difficulty tier
            level: Level number (1-indexed)
            seed: Optional seed for a deterministic puzzle

        Returns:
            CodePuzzle with exactly one candidate mapping input to output

        Raises:
            GenerationError: If the level's code set is malformed
        """
        if tier.family is not PuzzleFamily.CODE:
            raise GenerationError(f"Tier '{tier.name}' belongs to the {tier.family.value} family")

        try:
            spec = level_spec(tier, level)
        except ValueError as e:
            raise GenerationError(str(e)) from e

        codes = spec.codes
        if not codes:
            raise GenerationError(f"No codes defined for {tier.name} level {level}")
        invalid = [c for c in codes if not is_permutation_code(c, len(INPUT_ORDER))]
        if invalid:
            raise GenerationError(f"Codes are not permutations of {len(INPUT_ORDER)}: {invalid}")
        if len(set(codes)) != len(codes):
            raise GenerationError(f"Duplicate codes for {tier.name} level {level}")

        rng = random.Random(seed) if seed is not None else self._rng
        code = rng.choice(codes)
        output = CodePuzzle.apply_code(code, INPUT_ORDER)

        matching = [c for c in codes if CodePuzzle.apply_code(c, INPUT_ORDER) == output]
        if matching != [code]:
            raise GenerationError(f"Output {output} is produced by {len(matching)} candidate codes")

        logger.debug(f"Generated switch puzzle for {tier.name} level {level}: code {code}")

        return CodePuzzle(
            family=PuzzleFamily.CODE,
            difficulty=tier.difficulty,
            level=level,
            time_limit_seconds=spec.time_limit_seconds,
            target="code",
            unknowns=("code",),
            answer=code,
            candidates=tuple(codes),
            input_order=INPUT_ORDER,
            output_order=output,
        )
