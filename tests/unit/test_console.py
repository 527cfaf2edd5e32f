"""Tests for console UI wrapper."""

from unittest.mock import patch

from rich.text import Text

from pathset.config.context import OutputContext, set_context
from pathset.ui.console import ConsoleUI


class TestConsoleUI:
    """Tests for ConsoleUI class."""

    def test_initialization(self):
        """ConsoleUI initializes with Rich Console."""
        ui = ConsoleUI()
        assert ui.console is not None

    def test_print_delegates_to_console(self):
        """print() delegates to Rich Console."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print("test message")
            mock_print.assert_called_once_with("test message")

    def test_print_error(self):
        """print_error() prints the message."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_error("Error message")
            text = mock_print.call_args[0][0]
            assert "Error message" in text.plain

    def test_print_success(self):
        """print_success() prints the message."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_success("Done")
            text = mock_print.call_args[0][0]
            assert "Done" in text.plain


class TestLog:
    """Tests for ConsoleUI.log diagnostics."""

    def test_header_style(self):
        """Level 0 is yellow."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("PathSet.delete build/* ...", 0)
            text = mock_print.call_args[0][0]
            assert isinstance(text, Text)
            assert text.plain == "PathSet.delete build/* ..."
            assert text.style == "yellow"

    def test_detail_style(self):
        """Level 1 is grey."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("Deleted a", 1)
            assert mock_print.call_args[0][0].style == "grey50"

    def test_unknown_level_uses_last_style(self):
        """Deeper levels reuse the last style."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("deep", 5)
            assert mock_print.call_args[0][0].style == "grey50"

    def test_markup_not_interpreted(self):
        """Brackets in paths are printed as-is."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("Deleted [red]x[/red].txt", 1)
            assert mock_print.call_args[0][0].plain == "Deleted [red]x[/red].txt"

    def test_silent_when_not_verbose(self):
        """Nothing printed when verbose is off."""
        set_context(OutputContext(verbose=False))
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("hidden")
            mock_print.assert_not_called()

    def test_no_color(self):
        """No style when color output is off."""
        set_context(OutputContext(color_output=False))
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("plain", 0)
            assert mock_print.call_args[0][0].style == ""

    def test_long_paths_not_wrapped(self):
        """Diagnostics are printed without hard wrapping."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.log("Deleted " + "a/" * 100 + "file.txt", 1)
            assert mock_print.call_args.kwargs["soft_wrap"] is True


class TestWrite:
    """Tests for ConsoleUI.write raw output."""

    def test_writes_text_unchanged(self, capsys):
        """Tabs and brackets are written as-is."""
        ui = ConsoleUI()
        ui.write("a\tb [red]c[/red]\n")
        assert capsys.readouterr().out == "a\tb [red]c[/red]\n"
