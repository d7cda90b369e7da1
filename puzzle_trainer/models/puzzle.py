"""Data models for generated puzzle instances."""

from dataclasses import dataclass
from typing import Any

from .tier import Difficulty, PuzzleFamily

Position = tuple[int, int]


@dataclass(frozen=True)
class Puzzle:
    """One generated puzzle instance.

    Holds the target unknown the player must resolve this turn, the answer the
    generator recorded for it, and the finite set of candidates offered.
    """

    family: PuzzleFamily
    difficulty: Difficulty
    level: int
    time_limit_seconds: int
    target: Any
    unknowns: tuple[Any, ...]
    answer: str
    candidates: tuple[str, ...]

    def is_correct(self, answer: str) -> bool:
        """Check a candidate against the recorded answer."""
        return answer == self.answer

    @property
    def correct_candidates(self) -> list[str]:
        """Candidates equal to the recorded answer (exactly one for a valid puzzle)."""
        return [c for c in self.candidates if c == self.answer]


@dataclass(frozen=True)
class GridPuzzle(Puzzle):
    """Latin-square shape grid with a subset of cells hidden."""

    solution: tuple[tuple[str, ...], ...]

    @property
    def size(self) -> int:
        return len(self.solution)

    @property
    def hidden(self) -> tuple[Position, ...]:
        return self.unknowns

    def is_hidden(self, row: int, col: int) -> bool:
        return (row, col) in self.unknowns

    def visible_grid(self) -> list[list[str | None]]:
        """Grid as shown to the player: hidden cells are None."""
        hidden = set(self.unknowns)
        return [
            [None if (r, c) in hidden else symbol for c, symbol in enumerate(row)]
            for r, row in enumerate(self.solution)
        ]


@dataclass(frozen=True)
class CodePuzzle(Puzzle):
    """Permutation-code switch: identify the code mapping input order to output order."""

    input_order: tuple[int, ...]
    output_order: tuple[int, ...]

    @staticmethod
    def apply_code(code: str, input_order: tuple[int, ...]) -> tuple[int, ...]:
        """Apply a switch code: the i-th input moves to position int(code[i])."""
        output: list[int] = [0] * len(input_order)
        for i, item in enumerate(input_order):
            output[int(code[i]) - 1] = item
        return tuple(output)
