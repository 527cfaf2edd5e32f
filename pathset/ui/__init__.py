"""User interface components."""

from pathset.ui.console import ConsoleUI, console

__all__ = [
    "ConsoleUI",
    "console",
]
