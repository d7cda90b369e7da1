"""Command-line interface for puzzle_trainer."""
