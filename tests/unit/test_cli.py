"""Tests for CLI argument parsing."""

import pytest
from pathlib import Path

from pathset.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self):
        """Creates an ArgumentParser."""
        parser = create_parser()
        assert parser.prog == "pathset"

    def test_command_required(self):
        """A sub-command is required."""
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_list_defaults(self):
        """list targets any path by default."""
        args = parse_arguments(['list', 'build/*'])

        assert args.command == 'list'
        assert args.pattern == 'build/*'
        assert args.selection == 'any'
        assert args.quiet is False
        assert args.no_color is False

    def test_files_flag(self):
        """--files selects files."""
        args = parse_arguments(['delete', 'build/*.map', '--files'])
        assert args.selection == 'files'

    def test_folders_flag(self):
        """--folders selects folders."""
        args = parse_arguments(['mkdir', 'out/*', '--folders'])
        assert args.selection == 'folders'

    def test_files_and_folders_exclusive(self):
        """--files and --folders cannot be combined."""
        with pytest.raises(SystemExit):
            parse_arguments(['list', '*', '--files', '--folders'])

    def test_move_destination(self):
        """move takes a destination."""
        args = parse_arguments(['move', 'a/*', 'dst/'])
        assert args.destination == 'dst/'

    def test_copy_requires_destination(self):
        """copy without destination is an error."""
        with pytest.raises(SystemExit):
            parse_arguments(['copy', 'a/*'])

    def test_global_flags(self):
        """Global flags come before the command."""
        args = parse_arguments(['-q', '--no-color', '--debug', '--log-file', 'x.log', 'cat', 'f.txt'])

        assert args.quiet is True
        assert args.no_color is True
        assert args.debug is True
        assert args.log_file == 'x.log'


class TestArgsToCLIArgs:
    """Tests for args_to_cli_args function."""

    def test_converts_namespace(self):
        """Converts a Namespace to CLIArgs."""
        namespace = parse_arguments(['--no-color', '--log-file', 'x.log', 'copy', 'a/*', 'b/', '--files'])

        cli_args = args_to_cli_args(namespace)

        assert isinstance(cli_args, CLIArgs)
        assert cli_args.command == 'copy'
        assert cli_args.pattern == 'a/*'
        assert cli_args.destination == 'b/'
        assert cli_args.selection == 'files'
        assert cli_args.color_output is False
        assert cli_args.log_file == Path('x.log')

    def test_cat_encoding(self):
        """cat keeps its encoding and has no selection."""
        cli_args = args_to_cli_args(parse_arguments(['cat', 'f.txt', '--encoding', 'latin-1']))

        assert cli_args.encoding == 'latin-1'
        assert cli_args.selection == 'any'
        assert cli_args.destination is None
