"""Entry point for the pathset package.

Run with: python -m pathset <command> <pattern> [destination]
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from pathset.config import (
    CLIArgs,
    args_to_cli_args,
    output_context,
    parse_arguments,
)
from pathset.config.settings import LOG_FILE_RETENTION, LOG_FILE_ROTATION
from pathset.core import PathSet
from pathset.ui import ConsoleUI


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
        log_file: Optional file receiving every record.
    """
    logger.remove()
    logger.enable("pathset")
    level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if log_file is not None:
        logger.add(
            log_file,
            rotation=LOG_FILE_ROTATION,
            retention=LOG_FILE_RETENTION,
            level="DEBUG",
        )


def build_path_set(cli_args: CLIArgs) -> PathSet:
    """Pick the PathSet constructor matching --files/--folders."""
    if cli_args.selection == 'files':
        return PathSet.files_only(cli_args.pattern)
    if cli_args.selection == 'folders':
        return PathSet.folders_only(cli_args.pattern)
    return PathSet.any(cli_args.pattern)


def run_command(cli_args: CLIArgs, console: ConsoleUI) -> int:
    """
    Run one sub-command.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.

    Returns:
        Exit code.
    """
    if cli_args.command == 'cat':
        content = PathSet.untracked(cli_args.pattern).read(cli_args.encoding)
        if content is None:
            console.print_error(f"No such file: {cli_args.pattern}")
            return 2
        console.write(content)
        return 0

    path_set = build_path_set(cli_args)

    if cli_args.command == 'list':
        for path in path_set:
            console.print(path, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return 0

    if cli_args.command == 'delete':
        total = path_set.delete()
        console.print_success(f"{total} path(s) deleted")
    elif cli_args.command == 'move':
        total = path_set.move_to(cli_args.destination)
        console.print_success(f"{total} path(s) moved")
    elif cli_args.command == 'copy':
        total = path_set.copy_to(cli_args.destination)
        console.print_success(f"{total} path(s) copied")
    elif cli_args.command == 'mkdir':
        path_set.create_folders()
        console.print_success(f"Folders ensured for {cli_args.pattern}")
    else:
        raise ValueError(f"Unknown command: {cli_args.command}")

    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the pathset command.

    Args:
        argv: Argument list (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug, cli_args.log_file)

    with output_context(verbose=not cli_args.quiet, color_output=cli_args.color_output):
        console = ConsoleUI()
        try:
            return run_command(cli_args, console)
        except (OSError, ValueError) as e:
            logger.error(f"{cli_args.command} {cli_args.pattern} failed: {e}")
            console.print_error(str(e))
            return 1


if __name__ == "__main__":
    sys.exit(main())
