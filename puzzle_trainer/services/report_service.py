"""Build end-of-session reports from session state."""

import math

from puzzle_trainer.models import PuzzleFamily, Session, SessionOutcome, SessionReport

from .scoring_service import total_score


def total_time_taken(session: Session, now: float) -> int:
    """Whole seconds from the session's first level start to now."""
    return max(0, math.floor(now - session.started_at))


def build_report(
    session: Session, family: PuzzleFamily, now: float, player_id: object = None
) -> SessionReport:
    """Summarize a session for the report stage.

    Args:
        session: Session to summarize
        family: Puzzle family that was played
        now: Current clock reading
        player_id: Opaque player identifier, passed through unchanged

    Returns:
        SessionReport derived from the session's level rewards
    """
    if session.outcome is SessionOutcome.COMPLETED:
        highest = session.tier.level_count
    else:
        highest = session.level

    return SessionReport(
        family=family,
        difficulty=session.tier.difficulty,
        level_count=session.tier.level_count,
        level_rewards=tuple(session.level_rewards),
        total_score=total_score(session.level_rewards),
        outcome=session.outcome,
        highest_level=highest,
        total_time_taken=total_time_taken(session, now),
        player_id=player_id,
    )
