"""Report stage: per-level rewards and the session total."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from puzzle_trainer.gui.resources.styles import FONT_SIZES, SPACING
from puzzle_trainer.models import SessionOutcome, SessionReport

HEADLINES = {
    SessionOutcome.COMPLETED: "All levels complete!",
    SessionOutcome.TIMED_OUT: "Time's up!",
    SessionOutcome.ABORTED: "Session ended early",
}


class ReportPage(QWidget):
    """Session summary with play-again and finish actions."""

    play_again_requested = pyqtSignal()
    finish_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.lg, SPACING.lg, SPACING.lg)
        layout.setSpacing(SPACING.md)

        self.headline_label = QLabel()
        headline_font = QFont()
        headline_font.setPixelSize(FONT_SIZES.h1)
        headline_font.setWeight(QFont.Weight.Bold)
        self.headline_label.setFont(headline_font)
        layout.addWidget(self.headline_label)

        self.summary_label = QLabel()
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Level", "Time (s)", "Wrong", "Reward"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self.table)

        self.total_label = QLabel()
        total_font = QFont()
        total_font.setPixelSize(FONT_SIZES.h3)
        total_font.setWeight(QFont.Weight.Bold)
        self.total_label.setFont(total_font)
        layout.addWidget(self.total_label)

        buttons = QHBoxLayout()
        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.clicked.connect(self.play_again_requested)
        buttons.addWidget(self.play_again_button)
        buttons.addStretch()
        self.finish_button = QPushButton("Finish")
        self.finish_button.setDefault(True)
        self.finish_button.clicked.connect(self.finish_requested)
        buttons.addWidget(self.finish_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def show_report(self, report: SessionReport) -> None:
        """Fill the page from a session report."""
        self.headline_label.setText(HEADLINES.get(report.outcome, "Session report"))
        self.summary_label.setText(
            f"You reached level {report.highest_level} of {report.level_count} "
            f"in {report.difficulty.value} mode in {report.total_time_taken}s."
        )

        self.table.setRowCount(len(report.level_rewards))
        for row, reward in enumerate(report.level_rewards):
            values = (reward.level, reward.time_spent, reward.wrong_answers, f"{reward.reward:.2f}")
            for col, value in enumerate(values):
                self.table.setItem(row, col, QTableWidgetItem(str(value)))

        self.total_label.setText(f"Total score: {report.total_score:.2f}")
