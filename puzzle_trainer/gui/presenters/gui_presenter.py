"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from puzzle_trainer.models import LevelReward, Puzzle, SessionReport, Stage


class GUIPresenter(QObject):
    """Presenter that re-emits every game event as a Qt signal.

    Implements GamePresenter through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    info_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    stage_signal = pyqtSignal(object)  # Stage
    puzzle_signal = pyqtSignal(object, int)  # Puzzle, level count
    remaining_signal = pyqtSignal(int)
    penalty_signal = pyqtSignal(int, int)  # penalty seconds, remaining
    level_reward_signal = pyqtSignal(object)  # LevelReward
    time_up_signal = pyqtSignal(int)  # level
    report_signal = pyqtSignal(object)  # SessionReport

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_stage(self, stage: Stage) -> None:
        self.stage_signal.emit(stage)

    def show_puzzle(self, puzzle: Puzzle, level_count: int) -> None:
        """Display the puzzle for a new level.

        Args:
            puzzle: Generated puzzle
            level_count: Number of levels in the session
        """
        self.puzzle_signal.emit(puzzle, level_count)

    def show_remaining(self, seconds: int) -> None:
        self.remaining_signal.emit(seconds)

    def show_penalty(self, penalty_seconds: int, remaining: int) -> None:
        self.penalty_signal.emit(penalty_seconds, remaining)

    def show_level_reward(self, reward: LevelReward) -> None:
        self.level_reward_signal.emit(reward)

    def show_time_up(self, level: int) -> None:
        self.time_up_signal.emit(level)

    def show_report(self, report: SessionReport) -> None:
        self.report_signal.emit(report)
