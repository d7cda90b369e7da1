"""Design variables for consistent UI styling.

Usage:
    from puzzle_trainer.gui.resources.styles import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.md)
    font.setPixelSize(FONT_SIZES.h3)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on 4px/8px grid system."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12
    md: int = 16
    lg: int = 24
    xl: int = 32


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    h1: int = 24  # Page titles
    h2: int = 20  # Level header
    h3: int = 16  # Section headers
    body: int = 14
    caption: int = 12
    timer: int = 28
    cell: int = 18  # Grid cells and switch shapes


@dataclass(frozen=True)
class Colors:
    """Feedback colors."""

    correct: str = "#2e7d32"
    wrong: str = "#c62828"
    warning: str = "#ef6c00"
    target: str = "#1565c0"
    hidden: str = "#9e9e9e"


SPACING = Spacing()
FONT_SIZES = FontSizes()
COLORS = Colors()
