"""Play stage: puzzle display, countdown and answer options."""

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from puzzle_trainer.config.tiers import SWITCH_SHAPES
from puzzle_trainer.gui.resources.styles import COLORS, FONT_SIZES, SPACING
from puzzle_trainer.models import CodePuzzle, GridPuzzle, LevelReward, Puzzle

SHAPE_GLYPHS = {
    "square": "■",
    "triangle": "▲",
    "circle": "●",
    "pentagon": "⬟",
    "diamond": "◆",
    "hexagon": "⬢",
    "asterisk": "✱",
}

FEEDBACK_MS = 1500


def glyph(shape: str) -> str:
    return SHAPE_GLYPHS.get(shape, shape)


class PlayPage(QWidget):
    """Shows the current puzzle and collects one answer at a time."""

    answer_submitted = pyqtSignal(object)  # candidate str, or None if nothing selected
    back_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._candidates: tuple[str, ...] = ()
        self._feedback_timer = QTimer(self)
        self._feedback_timer.setSingleShot(True)
        self._feedback_timer.timeout.connect(self._clear_feedback)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.lg, SPACING.lg, SPACING.lg)
        layout.setSpacing(SPACING.md)

        header = QHBoxLayout()
        self.level_label = QLabel()
        level_font = QFont()
        level_font.setPixelSize(FONT_SIZES.h2)
        level_font.setWeight(QFont.Weight.Bold)
        self.level_label.setFont(level_font)
        header.addWidget(self.level_label)
        header.addStretch()
        self.timer_label = QLabel()
        timer_font = QFont()
        timer_font.setPixelSize(FONT_SIZES.timer)
        timer_font.setWeight(QFont.Weight.Bold)
        self.timer_label.setFont(timer_font)
        header.addWidget(self.timer_label)
        layout.addLayout(header)

        self.prompt_label = QLabel()
        layout.addWidget(self.prompt_label)

        self.board = QWidget()
        self.board_layout = QGridLayout()
        self.board_layout.setSpacing(SPACING.xxs)
        self.board.setLayout(self.board_layout)
        layout.addWidget(self.board, alignment=Qt.AlignmentFlag.AlignCenter)

        self.options_layout = QHBoxLayout()
        self.options_group = QButtonGroup(self)
        self.options_group.idToggled.connect(self._on_option_toggled)
        layout.addLayout(self.options_layout)

        self.feedback_label = QLabel()
        layout.addWidget(self.feedback_label)

        layout.addStretch()

        buttons = QHBoxLayout()
        self.back_button = QPushButton("Quit")
        self.back_button.clicked.connect(self.back_requested)
        buttons.addWidget(self.back_button)
        buttons.addStretch()
        self.submit_button = QPushButton("Submit")
        self.submit_button.setDefault(True)
        self.submit_button.setEnabled(False)
        self.submit_button.clicked.connect(self._on_submit)
        buttons.addWidget(self.submit_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    # ------------------------------------------------------------------
    # Presenter slots
    # ------------------------------------------------------------------

    def show_puzzle(self, puzzle: Puzzle, level_count: int) -> None:
        """Render a new puzzle and reset the answer options."""
        self.level_label.setText(f"Level {puzzle.level} / {level_count}")
        self._clear_board()
        if isinstance(puzzle, GridPuzzle):
            self.prompt_label.setText("Which shape belongs in the highlighted cell?")
            self._render_grid(puzzle)
        elif isinstance(puzzle, CodePuzzle):
            self.prompt_label.setText("Which switch code turns the input into the output?")
            self._render_switch(puzzle)
        self._set_options(puzzle)
        # Enabled once an option is picked
        self.submit_button.setEnabled(False)

    def show_remaining(self, seconds: int) -> None:
        minutes, secs = divmod(seconds, 60)
        self.timer_label.setText(f"{minutes}:{secs:02d}")
        color = COLORS.wrong if seconds <= 10 else "palette(text)"
        self.timer_label.setStyleSheet(f"color: {color};")

    def show_penalty(self, penalty_seconds: int, remaining: int) -> None:
        self.show_remaining(remaining)
        self._flash(f"Wrong answer: -{penalty_seconds}s", COLORS.wrong)

    def show_level_reward(self, reward: LevelReward) -> None:
        self._flash(f"Correct! +{reward.reward:.2f} points", COLORS.correct)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _cell(self, text: str, color: str | None = None, bordered: bool = True) -> QLabel:
        label = QLabel(text)
        font = QFont()
        font.setPixelSize(FONT_SIZES.cell)
        label.setFont(font)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setMinimumSize(44, 44)
        style = "border: 1px solid palette(mid);" if bordered else ""
        if color:
            style += f" color: {color};"
        label.setStyleSheet(style)
        return label

    def _clear_board(self) -> None:
        while self.board_layout.count():
            item = self.board_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

    def _render_grid(self, puzzle: GridPuzzle) -> None:
        for r, row in enumerate(puzzle.visible_grid()):
            for c, symbol in enumerate(row):
                if (r, c) == puzzle.target:
                    cell = self._cell("?", COLORS.target)
                elif symbol is None:
                    cell = self._cell("", COLORS.hidden)
                else:
                    cell = self._cell(glyph(symbol))
                self.board_layout.addWidget(cell, r, c)

    def _render_switch(self, puzzle: CodePuzzle) -> None:
        self.board_layout.addWidget(self._cell("Input", bordered=False), 0, 0)
        self.board_layout.addWidget(self._cell("Output", bordered=False), 1, 0)
        for i, item in enumerate(puzzle.input_order, 1):
            self.board_layout.addWidget(self._cell(glyph(SWITCH_SHAPES[item])), 0, i)
        for i, item in enumerate(puzzle.output_order, 1):
            self.board_layout.addWidget(self._cell(glyph(SWITCH_SHAPES[item])), 1, i)

    def _set_options(self, puzzle: Puzzle) -> None:
        for button in self.options_group.buttons():
            self.options_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._candidates = tuple(puzzle.candidates)
        is_grid = isinstance(puzzle, GridPuzzle)
        for index, candidate in enumerate(self._candidates):
            text = f"{glyph(candidate)} {candidate}" if is_grid else candidate
            button = QRadioButton(text)
            self.options_group.addButton(button, index)
            self.options_layout.addWidget(button)

    def selected_answer(self) -> str | None:
        """Currently selected candidate, or None."""
        index = self.options_group.checkedId()
        if index < 0:
            return None
        return self._candidates[index]

    def _on_option_toggled(self, index: int, checked: bool) -> None:
        self.submit_button.setEnabled(self.options_group.checkedId() >= 0)

    def _on_submit(self) -> None:
        answer = self.selected_answer()
        if answer is not None:
            self.answer_submitted.emit(answer)

    def _flash(self, message: str, color: str) -> None:
        self.feedback_label.setText(message)
        self.feedback_label.setStyleSheet(f"color: {color}; font-weight: bold;")
        self._feedback_timer.start(FEEDBACK_MS)

    def _clear_feedback(self) -> None:
        self.feedback_label.clear()
