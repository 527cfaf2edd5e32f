"""Configuration settings and constants for the pathset package."""

from typing import Tuple

# Text encoding used by read/write/append when none is given
DEFAULT_ENCODING: str = "utf-8"

# Indentation of JSON written back by alter_json (None or 0 for compact)
DEFAULT_JSON_INDENT: int = 2

# Compact JSON separators, no whitespace after ',' and ':'
COMPACT_JSON_SEPARATORS: Tuple[str, str] = (",", ":")

# Console styles indexed by diagnostic level
# 0 -> operation header, 1 -> per-path detail
LOG_LEVEL_STYLES: Tuple[str, ...] = ("yellow", "grey50")

# Diagnostics are printed unless explicitly silenced
DEFAULT_VERBOSE: bool = True
DEFAULT_COLOR_OUTPUT: bool = True

# Log file sink used by the command-line entry point
LOG_FILE_ROTATION: str = "10 MB"
LOG_FILE_RETENTION: str = "7 days"
