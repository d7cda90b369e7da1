"""Factory for creating the puzzle generator behind a catalogue game."""

import random

from puzzle_trainer.config.catalogue import get_game
from puzzle_trainer.interfaces import PuzzleGenerator
from puzzle_trainer.models import PuzzleFamily

from .code_generator import PermutationCodeGenerator
from .grid_generator import LatinSquareGenerator


def create_generator(family: PuzzleFamily, rng: random.Random | None = None) -> PuzzleGenerator:
    """Create the generator strategy for a puzzle family.

    Args:
        family: Puzzle family
        rng: Optional shared random source

    Returns:
        A PuzzleGenerator implementation
    """
    if family is PuzzleFamily.GRID:
        return LatinSquareGenerator(rng=rng)
    if family is PuzzleFamily.CODE:
        return PermutationCodeGenerator(rng=rng)
    raise ValueError(f"No generator registered for family {family}")


def create_generator_for_game(game_id: str, seed: int | None = None) -> PuzzleGenerator:
    """Create the generator for a catalogue game id, optionally seeded."""
    game = get_game(game_id)
    rng = random.Random(seed) if seed is not None else None
    return create_generator(game.family, rng=rng)
