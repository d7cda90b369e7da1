"""Configuration stage: pick a game and difficulty."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from puzzle_trainer.config import GAMES, describe_tier, get_game, get_tier
from puzzle_trainer.gui.resources.styles import FONT_SIZES, SPACING
from puzzle_trainer.models import Difficulty


class ConfigPage(QWidget):
    """Game and difficulty selection with a live tier summary."""

    game_changed = pyqtSignal(str)  # game id
    start_requested = pyqtSignal(str, bool)  # difficulty value, show instructions

    def __init__(self, game_id: str = "geo-sudo", difficulty: str = "medium", parent=None):
        """Initialize the config page.

        Args:
            game_id: Initially selected game
            difficulty: Initially selected difficulty value
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._setup_ui()
        self.game_combo.setCurrentIndex(max(0, self.game_combo.findData(game_id)))
        self.difficulty_combo.setCurrentIndex(max(0, self.difficulty_combo.findData(difficulty)))
        self._refresh_summary()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.lg, SPACING.lg, SPACING.lg)
        layout.setSpacing(SPACING.md)

        title = QLabel("Choose your challenge")
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h1)
        title_font.setWeight(QFont.Weight.Bold)
        title.setFont(title_font)
        layout.addWidget(title)

        form = QFormLayout()
        self.game_combo = QComboBox()
        for game in GAMES.values():
            self.game_combo.addItem(game.name, game.id)
        self.game_combo.currentIndexChanged.connect(self._on_game_changed)
        form.addRow("Game:", self.game_combo)

        self.difficulty_combo = QComboBox()
        for difficulty in Difficulty:
            self.difficulty_combo.addItem(difficulty.value.title(), difficulty.value)
        self.difficulty_combo.currentIndexChanged.connect(self._refresh_summary)
        form.addRow("Difficulty:", self.difficulty_combo)
        layout.addLayout(form)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.summary_label = QLabel()
        self.summary_label.setObjectName("caption")
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.instructions_check = QCheckBox("Show the rules before playing")
        layout.addWidget(self.instructions_check)

        layout.addStretch()

        self.start_button = QPushButton("Start")
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._on_start)
        layout.addWidget(self.start_button)

        self.setLayout(layout)

    @property
    def game_id(self) -> str:
        return self.game_combo.currentData()

    @property
    def difficulty(self) -> str:
        return self.difficulty_combo.currentData()

    def _on_game_changed(self, index: int) -> None:
        self._refresh_summary()
        self.game_changed.emit(self.game_id)

    def _refresh_summary(self) -> None:
        game = get_game(self.game_id)
        tier = get_tier(game.family, self.difficulty)
        self.description_label.setText(game.description)
        self.summary_label.setText("\n".join(f"- {line}" for line in describe_tier(tier)))

    def _on_start(self) -> None:
        self.start_requested.emit(self.difficulty, self.instructions_check.isChecked())
