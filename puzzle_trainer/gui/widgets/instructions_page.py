"""Instructions stage: show the rules and require acknowledgement."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from puzzle_trainer.config import GameInfo
from puzzle_trainer.gui.resources.styles import FONT_SIZES, SPACING


class InstructionsPage(QWidget):
    """Rules text with an 'I understand' checkbox gating the start button."""

    acknowledged_changed = pyqtSignal(bool)
    start_requested = pyqtSignal()
    back_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.lg, SPACING.lg, SPACING.lg)
        layout.setSpacing(SPACING.md)

        self.title_label = QLabel()
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h1)
        title_font.setWeight(QFont.Weight.Bold)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        self.rules_label = QLabel()
        self.rules_label.setWordWrap(True)
        layout.addWidget(self.rules_label)

        layout.addStretch()

        self.agree_check = QCheckBox("I have read and understood the rules")
        self.agree_check.toggled.connect(self._on_toggled)
        layout.addWidget(self.agree_check)

        buttons = QHBoxLayout()
        self.back_button = QPushButton("Back")
        self.back_button.clicked.connect(self.back_requested)
        buttons.addWidget(self.back_button)
        buttons.addStretch()
        self.start_button = QPushButton("Start")
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self.start_requested)
        buttons.addWidget(self.start_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def show_game(self, game: GameInfo, acknowledged: bool = False) -> None:
        """Fill in the rules for a game."""
        self.title_label.setText(f"How to play {game.name}")
        self.rules_label.setText("\n".join(f"• {rule}" for rule in game.rules))
        self.agree_check.setChecked(acknowledged)
        self.start_button.setEnabled(acknowledged)

    def _on_toggled(self, checked: bool) -> None:
        self.start_button.setEnabled(checked)
        self.acknowledged_changed.emit(checked)
