"""Core working-set model."""

from pathset.core.path_set import PathSet

__all__ = [
    "PathSet",
]
