"""Null presenter for testing (no output)."""

from puzzle_trainer.models import LevelReward, Puzzle, SessionReport, Stage


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        pass

    def show_warning(self, message: str) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_stage(self, stage: Stage) -> None:
        pass

    def show_puzzle(self, puzzle: Puzzle, level_count: int) -> None:
        pass

    def show_remaining(self, seconds: int) -> None:
        pass

    def show_penalty(self, penalty_seconds: int, remaining: int) -> None:
        pass

    def show_level_reward(self, reward: LevelReward) -> None:
        pass

    def show_time_up(self, level: int) -> None:
        pass

    def show_report(self, report: SessionReport) -> None:
        pass
