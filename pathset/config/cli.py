"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pathset.config.settings import DEFAULT_ENCODING

# Sub-commands acting on a resolved working set
SET_COMMANDS = ('list', 'delete', 'move', 'copy', 'mkdir')


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        command: Sub-command to run.
        pattern: Glob pattern (or literal path for cat).
        destination: Destination for move/copy, trailing slash for a directory.
        selection: Which constructor to use: "files", "folders" or "any".
        encoding: Text encoding for cat.
        quiet: If True, disable console diagnostics.
        color_output: If False, print diagnostics without styling.
        debug: If True, enable debug-level logging.
        log_file: Optional log file path.
    """

    command: str = 'list'
    pattern: str = ''
    destination: Optional[str] = None
    selection: str = 'any'
    encoding: str = DEFAULT_ENCODING
    quiet: bool = False
    color_output: bool = True
    debug: bool = False
    log_file: Optional[Path] = None


def _add_selection_flags(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive --files/--folders flags."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '--files',
        dest='selection',
        action='store_const',
        const='files',
        help='only target existing regular files'
    )
    group.add_argument(
        '--folders',
        dest='selection',
        action='store_const',
        const='folders',
        help='only target existing directories'
    )
    parser.set_defaults(selection='any')


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='pathset',
        description="""
        Resolves a glob pattern and runs one batch operation
        over every matching file or folder.
        """
    )

    # Output flags
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="do not print operation details"
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help="print operation details without colors"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help="also write the log to this file"
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='print matching paths')
    list_parser.add_argument('pattern', help='glob pattern')
    _add_selection_flags(list_parser)

    delete_parser = subparsers.add_parser('delete', help='remove matching paths')
    delete_parser.add_argument('pattern', help='glob pattern')
    _add_selection_flags(delete_parser)

    for name, verb in (('move', 'move'), ('copy', 'copy')):
        sub = subparsers.add_parser(name, help=f'{verb} matching paths')
        sub.add_argument('pattern', help='glob pattern')
        sub.add_argument(
            'destination',
            help='destination path, end it with a slash to target a directory'
        )
        _add_selection_flags(sub)

    mkdir_parser = subparsers.add_parser(
        'mkdir',
        help='create the pattern (or every matching path) as a directory'
    )
    mkdir_parser.add_argument('pattern', help='directory path or glob pattern')
    _add_selection_flags(mkdir_parser)

    cat_parser = subparsers.add_parser('cat', help='print a file content')
    cat_parser.add_argument('pattern', help='file path')
    cat_parser.add_argument(
        '--encoding',
        default=DEFAULT_ENCODING,
        help=f"text encoding (default: {DEFAULT_ENCODING})"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        command=namespace.command,
        pattern=namespace.pattern,
        destination=getattr(namespace, 'destination', None),
        selection=getattr(namespace, 'selection', 'any'),
        encoding=getattr(namespace, 'encoding', DEFAULT_ENCODING),
        quiet=namespace.quiet,
        color_output=not namespace.no_color,
        debug=namespace.debug,
        log_file=Path(namespace.log_file) if namespace.log_file else None,
    )
