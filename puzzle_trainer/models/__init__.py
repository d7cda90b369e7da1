"""Data models for Puzzle Trainer."""

from .puzzle import CodePuzzle, GridPuzzle, Position, Puzzle
from .report import SessionReport
from .session import LevelReward, Session, SessionOutcome, Stage, SubmissionOutcome
from .tier import Difficulty, DifficultyTier, LevelSpec, PuzzleFamily

__all__ = [
    "Difficulty",
    "PuzzleFamily",
    "DifficultyTier",
    "LevelSpec",
    "Puzzle",
    "GridPuzzle",
    "CodePuzzle",
    "Position",
    "Stage",
    "SessionOutcome",
    "SubmissionOutcome",
    "LevelReward",
    "Session",
    "SessionReport",
]
