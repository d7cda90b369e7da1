"""PyQt6 desktop host for puzzle_trainer."""
