"""
Pathset - Batch filesystem operations over glob patterns.

Resolves a glob pattern to a working set of files or folders, then:
- Deletes, moves or copies every matched path in one call
- Reads, writes and appends single text files, creating parents
- Rewrites text or JSON files through a handler
"""

from loguru import logger

from pathset.core import PathSet
from pathset.filesystem import resolve_destination

__version__ = "0.1.0"

__all__ = [
    "PathSet",
    "resolve_destination",
]

# Library records stay silent unless the host enables them
logger.disable("pathset")
