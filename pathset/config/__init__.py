"""Configuration and CLI handling."""

from pathset.config.settings import (
    DEFAULT_ENCODING,
    DEFAULT_JSON_INDENT,
    COMPACT_JSON_SEPARATORS,
    LOG_LEVEL_STYLES,
    DEFAULT_VERBOSE,
    DEFAULT_COLOR_OUTPUT,
)
from pathset.config.context import (
    OutputContext,
    get_context,
    set_context,
    set_verbose,
    output_context,
)
from pathset.config.cli import (
    CLIArgs,
    SET_COMMANDS,
    create_parser,
    parse_arguments,
    args_to_cli_args,
)

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_JSON_INDENT",
    "COMPACT_JSON_SEPARATORS",
    "LOG_LEVEL_STYLES",
    "DEFAULT_VERBOSE",
    "DEFAULT_COLOR_OUTPUT",
    "OutputContext",
    "get_context",
    "set_context",
    "set_verbose",
    "output_context",
    "CLIArgs",
    "SET_COMMANDS",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
]
