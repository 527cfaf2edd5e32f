"""Filesystem primitives used by PathSet."""

from pathset.filesystem.matching import (
    match,
    only_files,
    only_folders,
)
from pathset.filesystem.paths import resolve_destination
from pathset.filesystem.file_ops import (
    ensure_directory,
    remove_path,
    copy_path,
    move_path,
)
from pathset.filesystem.text_io import (
    read_text,
    read_text_if_exists,
    write_text,
    append_text,
)

__all__ = [
    "match",
    "only_files",
    "only_folders",
    "resolve_destination",
    "ensure_directory",
    "remove_path",
    "copy_path",
    "move_path",
    "read_text",
    "read_text_if_exists",
    "write_text",
    "append_text",
]
