"""Console UI wrapper using Rich library."""

from rich.console import Console
from rich.text import Text

from pathset.config.context import get_context
from pathset.config.settings import LOG_LEVEL_STYLES


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Operation diagnostics go through log(), which honours the
    process-wide verbose and color_output settings.
    """

    def __init__(self) -> None:
        """Initialize with Rich Console."""
        self.console = Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def log(self, message: str, level: int = 0) -> None:
        """
        Print an operation diagnostic, only if verbose is enabled.

        Markup in the message is not interpreted, paths may contain
        square brackets.

        Args:
            message: Text to print.
            level: 0 for an operation header, 1 for a per-path detail.
        """
        ctx = get_context()
        if not ctx.verbose:
            return

        style = ""
        if ctx.color_output:
            style = LOG_LEVEL_STYLES[min(level, len(LOG_LEVEL_STYLES) - 1)]
        self.console.print(Text(message, style=style), soft_wrap=True)

    def write(self, text: str) -> None:
        """Write raw text to the console output, without rendering."""
        self.console.file.write(text)
        self.console.file.flush()

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        text = Text(f"❌ {message}")
        if get_context().color_output:
            text.stylize("red")
        self.console.print(text)

    def print_success(self, message: str) -> None:
        """Print a success message with green styling."""
        text = Text(f"✓ {message}")
        if get_context().color_output:
            text.stylize("green")
        self.console.print(text)


# Global console instance shared by PathSet instances
console = ConsoleUI()
