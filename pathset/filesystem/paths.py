"""Destination path resolution for move and copy."""

import os
from typing import Union

# Separators that turn a destination into a directory target
_SEPARATORS = ("/", os.sep)


def resolve_destination(
    destination: Union[str, "os.PathLike[str]"],
    source: Union[str, "os.PathLike[str]"],
) -> str:
    """
    Compute where a source path lands for a move or copy.

    A destination ending with a separator is a directory: the source
    keeps its name inside it. Any other destination is the exact new
    path of the source.

    Args:
        destination: Destination path, with or without trailing separator.
        source: Path being moved or copied.

    Returns:
        Destination path for this source.

    Example:
        >>> resolve_destination("dst/", "a/b/file.txt")
        'dst/file.txt'
        >>> resolve_destination("dst/renamed.txt", "a/b/file.txt")
        'dst/renamed.txt'
    """
    destination = os.fspath(destination)
    if destination.endswith(_SEPARATORS):
        name = os.path.basename(os.path.normpath(os.fspath(source)))
        return os.path.join(destination, name)
    return destination
