"""Catalogue of playable games and their rules text."""

from dataclasses import dataclass

from puzzle_trainer.models import PuzzleFamily


@dataclass(frozen=True)
class GameInfo:
    """Metadata for one playable game."""

    id: str
    name: str
    description: str
    category: str
    family: PuzzleFamily
    estimated_time_min: int
    rules: tuple[str, ...]


_SCORING_RULES = (
    "Each level has a time limit",
    "Level rewards are calculated as: (Level)^2 x (Difficulty Multiplier) / (Time taken in seconds)",
    "Difficulty multipliers: Easy (1x), Medium (1.5x), Hard (2x), Expert (3x)",
    "Your total score is the sum of all level rewards",
    "Each incorrect answer deducts time from your timer and reduces that level's reward",
    "A level is always worth at least 10% of its reward, no matter how many wrong answers",
)

GAMES: dict[str, GameInfo] = {
    "geo-sudo": GameInfo(
        id="geo-sudo",
        name="Geo Sudo",
        description="Solve geometric Sudoku-style puzzles with shape placement",
        category="logic",
        family=PuzzleFamily.GRID,
        estimated_time_min=10,
        rules=(
            "You are given a grid where some positions are empty; one is highlighted",
            "Each geometric shape can only appear once in any row or column",
            "Determine which shape belongs in the highlighted position",
            "Select a shape from the options and submit your answer",
        )
        + _SCORING_RULES,
    ),
    "switch": GameInfo(
        id="switch",
        name="Switch",
        description="Decode the pattern that transforms shapes through the switch",
        category="pattern",
        family=PuzzleFamily.CODE,
        estimated_time_min=8,
        rules=(
            "You will see an input row of shapes and an output row with the shapes rearranged",
            "A switch code moves the n-th input shape to the position given by its n-th digit",
            "Pick the switch code that turns the input row into the output row",
            "Time limits get shorter as you progress",
        )
        + _SCORING_RULES,
    ),
}


def get_game(game_id: str) -> GameInfo:
    """Look up a game by id.

    Raises:
        ValueError: If the id is not in the catalogue
    """
    try:
        return GAMES[game_id]
    except KeyError:
        valid = ", ".join(sorted(GAMES))
        raise ValueError(f"Unknown game '{game_id}' (expected one of: {valid})") from None
