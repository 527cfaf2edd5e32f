"""Recursive copy, move and remove primitives."""

import os
import shutil
from pathlib import Path
from typing import Union

from loguru import logger

PathArg = Union[str, "os.PathLike[str]"]


def _is_real_dir(path: Path) -> bool:
    """Directory that is not a symlink to one."""
    return path.is_dir() and not path.is_symlink()


def ensure_directory(path: PathArg) -> None:
    """
    Create a directory and its missing ancestors.

    Args:
        path: Directory path. Existing directories are left alone,
            an existing file raises FileExistsError.
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def remove_path(path: PathArg) -> None:
    """
    Remove a file, a symlink or a whole directory tree.

    Missing paths are ignored.

    Args:
        path: Path to remove.
    """
    target = Path(path)
    if _is_real_dir(target):
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    else:
        logger.debug(f"Nothing to remove at {target}")


def copy_path(source: PathArg, destination: PathArg) -> None:
    """
    Copy a file or a directory tree.

    Parent directories of the destination are created. Files replace
    an existing destination, directories are merged into it.
    Symlinks are copied as symlinks.

    Args:
        source: Existing file or directory.
        destination: Exact destination path.
    """
    src = Path(source)
    dst = Path(destination)

    if not src.exists() and not src.is_symlink():
        raise FileNotFoundError(f"No such file or directory: '{src}'")

    if _is_real_dir(src):
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
    else:
        dst.parent.mkdir(parents=True, exist_ok=True)
        if _is_real_dir(dst):
            logger.debug(f"Replacing existing directory {dst}")
            shutil.rmtree(dst)
        shutil.copy2(src, dst, follow_symlinks=False)


def move_path(source: PathArg, destination: PathArg) -> None:
    """
    Move a file or a directory tree.

    Renames when possible, copies then deletes across filesystems.
    Parent directories of the destination are created and an existing
    destination is replaced.

    Args:
        source: Existing file or directory.
        destination: Exact destination path.
    """
    src = Path(source)
    dst = Path(destination)

    if not src.exists() and not src.is_symlink():
        raise FileNotFoundError(f"No such file or directory: '{src}'")

    if os.path.abspath(src) == os.path.abspath(dst):
        return

    if Path(os.path.abspath(src)).is_relative_to(os.path.abspath(dst)):
        raise shutil.Error(f"Cannot move {src} over its own ancestor {dst}")

    dst.parent.mkdir(parents=True, exist_ok=True)
    if dst.exists() or dst.is_symlink():
        logger.debug(f"Replacing existing destination {dst}")
        remove_path(dst)

    shutil.move(str(src), str(dst))
