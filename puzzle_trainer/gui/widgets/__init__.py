"""Stage pages for the main window."""

from .config_page import ConfigPage
from .instructions_page import InstructionsPage
from .play_page import PlayPage
from .report_page import ReportPage

__all__ = ["ConfigPage", "InstructionsPage", "PlayPage", "ReportPage"]
