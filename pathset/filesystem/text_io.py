"""Text file reading and writing without newline translation."""

import os
from typing import Optional

from pathset.filesystem.file_ops import PathArg, ensure_directory


def _ensure_parent(path: PathArg) -> None:
    """Create the parent directories of a file path."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        ensure_directory(parent)


def read_text(path: PathArg, encoding: str) -> str:
    """
    Read a whole text file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path, 'r', encoding=encoding, newline='') as handle:
        return handle.read()


def read_text_if_exists(path: PathArg, encoding: str) -> Optional[str]:
    """
    Read a whole text file, or return None if nothing exists at path.

    Args:
        path: File path.
        encoding: Text encoding.

    Returns:
        File content, or None for a missing path.
    """
    if not os.path.exists(path):
        return None
    return read_text(path, encoding)


def write_text(path: PathArg, content: str, encoding: str) -> None:
    """Replace a file content, creating the file and its parents."""
    _ensure_parent(path)
    with open(path, 'w', encoding=encoding, newline='') as handle:
        handle.write(content)


def append_text(path: PathArg, content: str, encoding: str) -> None:
    """Append to a file, creating the file and its parents."""
    _ensure_parent(path)
    with open(path, 'a', encoding=encoding, newline='') as handle:
        handle.write(content)
