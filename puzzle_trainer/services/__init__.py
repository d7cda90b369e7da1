"""Services for Puzzle Trainer."""

from .code_generator import PermutationCodeGenerator
from .generator_factory import create_generator, create_generator_for_game
from .grid_generator import LatinSquareGenerator
from .report_service import build_report
from .scheduler_service import CooperativeScheduler
from .scoring_service import level_reward, penalty_factor, total_score
from .timer_service import PenaltyTimer, remaining_seconds
from .validation_service import validate_answer

__all__ = [
    "LatinSquareGenerator",
    "PermutationCodeGenerator",
    "create_generator",
    "create_generator_for_game",
    "level_reward",
    "penalty_factor",
    "total_score",
    "PenaltyTimer",
    "remaining_seconds",
    "CooperativeScheduler",
    "build_report",
    "validate_answer",
]
