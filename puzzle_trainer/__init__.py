"""
Puzzle Trainer - Timed Cognitive Puzzle Engine

A level-progression engine for timed assessment puzzles: Latin-square shape
grids and permutation-code switches, with penalty-aware timing and scoring.
"""

__version__ = "1.0.0"
__author__ = "Puzzle Trainer Contributors"
