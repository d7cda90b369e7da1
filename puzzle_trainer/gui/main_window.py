"""Main window for the Puzzle Trainer GUI."""

import logging

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget

from puzzle_trainer import __version__
from puzzle_trainer.config import TrainerConfig, create_default_config, get_game
from puzzle_trainer.exceptions import InvalidSubmission, PuzzleTrainerException
from puzzle_trainer.gui.presenters import GUIPresenter
from puzzle_trainer.gui.qt_scheduler import QtScheduler
from puzzle_trainer.gui.widgets import ConfigPage, InstructionsPage, PlayPage, ReportPage
from puzzle_trainer.models import SessionReport, Stage
from puzzle_trainer.orchestration import LevelController
from puzzle_trainer.services import create_generator_for_game

logger = logging.getLogger(__name__)

WINDOW_MIN_WIDTH = 560
WINDOW_MIN_HEIGHT = 520
STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Stacked pages for the config, instructions, play and report stages.

    The window owns one LevelController per selected game and switches
    pages whenever the controller announces a stage change.
    """

    def __init__(self, config: TrainerConfig | None = None, on_complete=None):
        """Initialize the main window.

        Args:
            config: Initial configuration (defaults to create_default_config())
            on_complete: Extra receiver for (total_score, total_time_taken)
        """
        super().__init__()
        self.config = config or create_default_config()
        self.presenter = GUIPresenter(self)
        self.scheduler = QtScheduler(self)
        self.external_on_complete = on_complete
        self.last_reported: tuple[float, int] | None = None
        self.controller: LevelController | None = None

        self._setup_ui()
        self._connect_presenter_signals()
        self._build_controller(self.config.game_id)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Puzzle Trainer")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.config_page = ConfigPage(self.config.game_id, self.config.difficulty)
        self.instructions_page = InstructionsPage()
        self.play_page = PlayPage()
        self.report_page = ReportPage()
        self.config_page.instructions_check.setChecked(self.config.show_instructions)

        self.pages = QStackedWidget()
        self._page_for_stage = {
            Stage.CONFIG: self.config_page,
            Stage.INSTRUCTIONS: self.instructions_page,
            Stage.PLAY: self.play_page,
            Stage.REPORT: self.report_page,
        }
        for page in self._page_for_stage.values():
            self.pages.addWidget(page)
        self.setCentralWidget(self.pages)

        self.config_page.game_changed.connect(self._build_controller)
        self.config_page.start_requested.connect(self._on_configure)
        self.instructions_page.acknowledged_changed.connect(self._on_acknowledged)
        self.instructions_page.start_requested.connect(self._on_start)
        self.instructions_page.back_requested.connect(self._on_back)
        self.play_page.answer_submitted.connect(self._on_answer)
        self.play_page.back_requested.connect(self._on_back)
        self.report_page.play_again_requested.connect(self._on_play_again)
        self.report_page.finish_requested.connect(self._on_finish)

        self.statusBar()
        self._setup_menu_bar()
        self._setup_shortcuts()

    def _setup_menu_bar(self) -> None:
        help_menu = self.menuBar().addMenu("&Help")
        about_action = help_menu.addAction("About Puzzle Trainer")
        about_action.setShortcut(QKeySequence("F1"))
        about_action.triggered.connect(self._show_about)

    def _setup_shortcuts(self) -> None:
        """Number keys pick an answer option during play."""
        for i in range(1, 10):
            shortcut = QShortcut(QKeySequence(str(i)), self)
            shortcut.activated.connect(lambda idx=i - 1: self._select_option(idx))

    def _connect_presenter_signals(self) -> None:
        self.presenter.info_signal.connect(self._on_info_message)
        self.presenter.warning_signal.connect(self._on_warning_message)
        self.presenter.error_signal.connect(self._on_error_message)
        self.presenter.stage_signal.connect(self._on_stage)
        self.presenter.puzzle_signal.connect(self.play_page.show_puzzle)
        self.presenter.remaining_signal.connect(self.play_page.show_remaining)
        self.presenter.penalty_signal.connect(self.play_page.show_penalty)
        self.presenter.level_reward_signal.connect(self.play_page.show_level_reward)
        self.presenter.time_up_signal.connect(self._on_time_up)
        self.presenter.report_signal.connect(self.report_page.show_report)

    # ------------------------------------------------------------------
    # Controller wiring
    # ------------------------------------------------------------------

    def _build_controller(self, game_id: str) -> None:
        """Create a controller for the selected game (config stage only)."""
        if self.controller is not None:
            if self.controller.stage is not Stage.CONFIG:
                return
            self.controller.teardown()
        self.config = create_default_config(
            game_id=game_id,
            difficulty=self.config.difficulty,
            show_instructions=self.config.show_instructions,
            tick_interval=self.config.tick_interval,
            preview_mode=self.config.preview_mode,
            rng_seed=self.config.rng_seed,
        )
        self.controller = LevelController(
            generator=create_generator_for_game(game_id),
            presenter=self.presenter,
            scheduler=self.scheduler,
            config=self.config,
            on_complete=self._on_complete,
        )
        logger.debug(f"Controller ready for {game_id}")

    def _on_complete(self, total_score: float, total_time_taken: int) -> None:
        self.last_reported = (total_score, total_time_taken)
        self.statusBar().showMessage(
            f"Score recorded: {total_score:.2f} in {total_time_taken}s", STATUS_TIMEOUT_MS
        )
        if self.external_on_complete is not None:
            self.external_on_complete(total_score, total_time_taken)

    def _run(self, action, *args) -> None:
        try:
            action(*args)
        except PuzzleTrainerException as e:
            logger.warning(f"Action rejected: {e}")
            self._on_warning_message(str(e))

    def _on_configure(self, difficulty: str, show_instructions: bool) -> None:
        self._run(self.controller.configure, difficulty, show_instructions)

    def _on_acknowledged(self, agreed: bool) -> None:
        if self.controller.stage is Stage.INSTRUCTIONS:
            self.controller.acknowledge_instructions(agreed)

    def _on_start(self) -> None:
        self._run(self.controller.start)

    def _on_back(self) -> None:
        self.controller.back_to_config()

    def _on_answer(self, answer) -> None:
        try:
            self.controller.submit(answer)
        except InvalidSubmission as e:
            self._on_warning_message(str(e))
        except PuzzleTrainerException as e:
            logger.warning(f"Submission rejected: {e}")

    def _on_play_again(self) -> None:
        self._run(self.controller.play_again)

    def _on_finish(self) -> SessionReport | None:
        try:
            return self.controller.finish()
        except PuzzleTrainerException as e:
            logger.warning(f"Finish rejected: {e}")
            return None

    def _select_option(self, index: int) -> None:
        if self.controller.stage is not Stage.PLAY:
            return
        button = self.play_page.options_group.button(index)
        if button is not None:
            button.setChecked(True)

    # ------------------------------------------------------------------
    # Presenter slots
    # ------------------------------------------------------------------

    def _on_stage(self, stage: Stage) -> None:
        if stage is Stage.INSTRUCTIONS:
            self.instructions_page.show_game(
                get_game(self.config.game_id), self.controller.instructions_acknowledged
            )
        self.pages.setCurrentWidget(self._page_for_stage[stage])

    def _on_time_up(self, level: int) -> None:
        self.statusBar().showMessage(f"Time's up on level {level}", STATUS_TIMEOUT_MS)

    def _on_info_message(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def _on_warning_message(self, message: str) -> None:
        self.statusBar().showMessage(f"Warning: {message}", STATUS_TIMEOUT_MS)

    def _on_error_message(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Puzzle Trainer",
            f"<h3>Puzzle Trainer {__version__}</h3>"
            "<p>Timed Latin-square and switch-code puzzles with penalties and scoring.</p>",
        )

    def closeEvent(self, event) -> None:
        """Stop the level timer before closing."""
        if self.controller is not None:
            self.controller.teardown()
        super().closeEvent(event)
