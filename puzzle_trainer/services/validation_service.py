"""Answer validation at the host boundary."""

from puzzle_trainer.exceptions import InvalidSubmission
from puzzle_trainer.models import Puzzle


def validate_answer(puzzle: Puzzle, answer: str | None) -> str:
    """Normalize a submitted answer and check it is one of the offered candidates.

    Args:
        puzzle: Puzzle being answered
        answer: Raw answer from the host (may be None or blank)

    Returns:
        The normalized answer

    Raises:
        InvalidSubmission: If no answer was chosen or it is not a candidate
    """
    if answer is None:
        raise InvalidSubmission("No answer selected")
    normalized = str(answer).strip()
    if not normalized:
        raise InvalidSubmission("No answer selected")
    if normalized not in puzzle.candidates:
        raise InvalidSubmission(f"'{normalized}' is not one of the offered answers")
    return normalized
