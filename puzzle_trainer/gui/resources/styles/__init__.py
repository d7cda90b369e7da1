"""Design tokens for the GUI."""

from ._variables import COLORS, FONT_SIZES, SPACING

__all__ = ["COLORS", "FONT_SIZES", "SPACING"]
