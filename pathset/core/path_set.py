"""PathSet: a glob-resolved working set of files or folders."""

import json
import os
from typing import Any, Callable, Iterator, List, Optional, Union

from loguru import logger

from pathset.config.context import set_verbose
from pathset.config.settings import (
    COMPACT_JSON_SEPARATORS,
    DEFAULT_ENCODING,
    DEFAULT_JSON_INDENT,
)
from pathset.filesystem import (
    append_text,
    copy_path,
    ensure_directory,
    match,
    move_path,
    only_files,
    only_folders,
    read_text,
    read_text_if_exists,
    remove_path,
    resolve_destination,
    write_text,
)
from pathset.ui.console import console

PatternArg = Union[str, "os.PathLike[str]"]


class PathSet:
    """
    Files or folders targeted by a glob pattern.

    The working set (``paths``) is resolved once at construction. Only
    delete() clears it and only move_to() replaces it; every other
    operation leaves it untouched.

    Content operations (read, write, append, alter, alter_json) act on
    ``pattern`` used as a literal file path, not on ``paths``.

    Attributes:
        pattern: Glob pattern or literal path the set was built from.
        paths: Ordered working set of matched paths.
    """

    def __init__(self, pattern: PatternArg, paths: List[str]) -> None:
        self.pattern = os.fspath(pattern)
        self.paths = paths

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def files_only(cls, pattern: PatternArg) -> "PathSet":
        """Target the existing regular files matched by a glob."""
        pattern = os.fspath(pattern)
        return cls(pattern, only_files(match(pattern)))

    @classmethod
    def folders_only(cls, pattern: PatternArg) -> "PathSet":
        """Target the existing directories matched by a glob."""
        pattern = os.fspath(pattern)
        return cls(pattern, only_folders(match(pattern)))

    @classmethod
    def any(cls, pattern: PatternArg) -> "PathSet":
        """Target every file or folder matched by a glob."""
        pattern = os.fspath(pattern)
        return cls(pattern, match(pattern))

    @classmethod
    def untracked(cls, pattern: PatternArg) -> "PathSet":
        """
        Target a file or folder that may not exist yet.

        Nothing is resolved: ``paths`` is empty and ``pattern`` is the
        literal path used by write(), append() and create_folders().
        """
        return cls(pattern, [])

    @staticmethod
    def set_verbose(verbose: bool) -> None:
        """Enable or disable console diagnostics for every instance."""
        set_verbose(verbose)

    # ------------------------------------------------------------------
    # Working set
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __repr__(self) -> str:
        return f"PathSet({self.pattern!r}, {len(self.paths)} path(s))"

    def exists(self) -> bool:
        """Check if the set targets at least one existing path."""
        return len(self.paths) > 0

    def all(self, handler: Callable[[str], Any]) -> List[Any]:
        """
        Apply a handler to every targeted path.

        Args:
            handler: Called with each path, in order.

        Returns:
            Handler results, in the same order.
        """
        return [handler(path) for path in self.paths]

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def delete(self) -> int:
        """
        Delete every targeted file or folder, without confirmation.

        Clears the working set.

        Returns:
            Number of paths removed.
        """
        console.log(f"PathSet.delete {self.pattern} ...", 0)
        logger.info(f"Deleting {len(self.paths)} path(s) matching {self.pattern}")

        for path in self.paths:
            remove_path(path)
            console.log(f"    Deleted {path}", 1)
            logger.debug(f"Deleted {path}")

        total = len(self.paths)
        self.paths = []
        return total

    def remove(self) -> int:
        """Alias of delete()."""
        return self.delete()

    def move_to(self, destination: PatternArg) -> int:
        """
        Move every targeted file or folder.

        A destination ending with a separator is a directory receiving
        each path under its own name. Otherwise it is the exact new path,
        so several sources overwrite each other there.

        Replaces the working set with the moved locations.

        Args:
            destination: Destination path. No glob.

        Returns:
            Number of paths moved.
        """
        console.log(f"PathSet.move_to {self.pattern} ...", 0)
        logger.info(f"Moving {len(self.paths)} path(s) matching {self.pattern} to {destination}")

        moved = []
        for path in self.paths:
            target = resolve_destination(destination, path)
            move_path(path, target)
            console.log(f"    {path} moved to {target}", 1)
            logger.debug(f"Moved {path} -> {target}")
            moved.append(target)

        total = len(self.paths)
        self.paths = moved
        return total

    def copy_to(self, destination: PatternArg) -> int:
        """
        Copy every targeted file or folder.

        Destinations are resolved as in move_to(). The working set is
        left unchanged.

        Args:
            destination: Destination path. No glob.

        Returns:
            Number of paths copied.
        """
        console.log(f"PathSet.copy_to {self.pattern} ...", 0)
        logger.info(f"Copying {len(self.paths)} path(s) matching {self.pattern} to {destination}")

        for path in self.paths:
            target = resolve_destination(destination, path)
            copy_path(path, target)
            console.log(f"    {path} copied to {target}", 1)
            logger.debug(f"Copied {path} -> {target}")

        return len(self.paths)

    # ------------------------------------------------------------------
    # Content operations
    # ------------------------------------------------------------------

    def read(self, encoding: str = DEFAULT_ENCODING) -> Optional[str]:
        """
        Read the file at ``pattern``.

        Returns:
            File content, or None if nothing exists there.
        """
        return read_text_if_exists(self.pattern, encoding)

    def write(self, content: str = "", encoding: str = DEFAULT_ENCODING) -> None:
        """Replace the content of the file at ``pattern``, creating parents."""
        write_text(self.pattern, content, encoding)
        logger.debug(f"Wrote {len(content)} character(s) to {self.pattern}")

    def append(
        self,
        content: str = "",
        add_leading_newline: bool = True,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """
        Append to the file at ``pattern``, creating it if needed.

        Args:
            content: Text to append.
            add_leading_newline: Start on a new line. Ignored when the file
                does not exist yet.
            encoding: Text encoding.
        """
        before = ""
        if add_leading_newline and os.path.exists(self.pattern):
            before = "\n"

        append_text(self.pattern, before + content, encoding)
        logger.debug(f"Appended {len(content)} character(s) to {self.pattern}")

    def alter(self, handler: Callable[[Optional[str]], str]) -> None:
        """
        Rewrite the file at ``pattern`` through a handler.

        Args:
            handler: Receives the current content (None if the file is
                missing) and returns the new content.
        """
        self.write(handler(self.read()))

    def alter_json(
        self,
        handler: Callable[[Any], Any],
        indent: Optional[int] = DEFAULT_JSON_INDENT,
    ) -> None:
        """
        Rewrite a JSON file through a handler.

        Nothing is written if the current content is not valid JSON.

        Args:
            handler: Receives the parsed content, returns the new value.
            indent: Indentation width, None or below 1 for compact output.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file content is not valid JSON.
        """
        data = json.loads(read_text(self.pattern, DEFAULT_ENCODING))

        if indent is not None and indent > 0:
            serialized = json.dumps(handler(data), indent=indent, ensure_ascii=False)
        else:
            serialized = json.dumps(
                handler(data),
                separators=COMPACT_JSON_SEPARATORS,
                ensure_ascii=False,
            )
        self.write(serialized)

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    def create_folders(self) -> None:
        """
        Create missing folders.

        With an empty working set, ``pattern`` is the directory to
        create. Otherwise every targeted path is ensured as a directory.
        """
        targets = self.paths if self.paths else [self.pattern]
        for path in targets:
            ensure_directory(path)
            logger.debug(f"Ensured directory {path}")

    def ensure_folders(self) -> None:
        """Alias of create_folders()."""
        self.create_folders()
