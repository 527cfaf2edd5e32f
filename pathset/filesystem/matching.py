"""Glob resolution and existence filters."""

import glob
import os
import stat
from typing import Iterable, List

from loguru import logger


def match(pattern: str) -> List[str]:
    """
    Resolve a glob pattern to the existing paths it matches.

    Supports the standard wildcards plus ``**`` for any depth. Hidden
    entries are only matched by patterns that name them explicitly.

    Args:
        pattern: Glob pattern or literal path.

    Returns:
        Sorted list of matching path strings.
    """
    paths = sorted(glob.glob(pattern, recursive=True))
    logger.debug(f"{pattern} matched {len(paths)} path(s)")
    return paths


def only_files(paths: Iterable[str]) -> List[str]:
    """
    Keep the regular files of a path list.

    Symlinks are not followed. A path that disappeared since it was
    matched raises FileNotFoundError.

    Args:
        paths: Paths to filter.

    Returns:
        Paths that are regular files, in their original order.
    """
    return [path for path in paths if stat.S_ISREG(os.lstat(path).st_mode)]


def only_folders(paths: Iterable[str]) -> List[str]:
    """
    Keep the directories of a path list.

    Args:
        paths: Paths to filter.

    Returns:
        Paths that are directories, in their original order.
    """
    return [path for path in paths if stat.S_ISDIR(os.lstat(path).st_mode)]
