"""Main GUI application entry point."""

import argparse
import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from puzzle_trainer.config import create_default_config
from puzzle_trainer.gui.main_window import MainWindow


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="puzzle-trainer-gui")
    parser.add_argument("--game", default="geo-sudo")
    parser.add_argument("--difficulty", default="medium")
    parser.add_argument("--preview", action="store_true", help="Do not record the score")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    # Qt consumes its own options from sys.argv
    args, _ = parser.parse_known_args(argv)
    return args


def main():
    """Launch the Puzzle Trainer GUI application."""
    args = parse_args(sys.argv[1:])
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Puzzle Trainer")
    app.setOrganizationName("PuzzleTrainer")

    config = create_default_config(
        game_id=args.game, difficulty=args.difficulty, preview_mode=args.preview
    )
    window = MainWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
