"""User interface components."""

from mediasort.ui.console import ConsoleUI
from mediasort.ui.display import display_configuration, display_report

__all__ = [
    "ConsoleUI",
    "display_configuration",
    "display_report",
]
