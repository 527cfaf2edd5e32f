"""Process-wide output context for pathset operations."""

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Generator, Optional

from pathset.config.settings import DEFAULT_COLOR_OUTPUT, DEFAULT_VERBOSE

# Global context storage
_current_context: Optional["OutputContext"] = None


@dataclass(frozen=True)
class OutputContext:
    """
    Output settings shared by every PathSet instance.

    Only gates diagnostic output; file operations behave the same
    whatever the values.

    Attributes:
        verbose: If True, operations print what they do to the console.
        color_output: If True, console diagnostics are styled with colors.
    """

    verbose: bool = DEFAULT_VERBOSE
    color_output: bool = DEFAULT_COLOR_OUTPUT


def get_context() -> OutputContext:
    """
    Get the current output context.

    Returns:
        Current OutputContext, or a default one if not set.
    """
    if _current_context is None:
        return OutputContext()
    return _current_context


def set_context(ctx: Optional[OutputContext]) -> None:
    """
    Set the global output context.

    Args:
        ctx: OutputContext to set, or None to reset to default.
    """
    global _current_context
    _current_context = ctx


def set_verbose(verbose: bool) -> None:
    """Enable or disable console diagnostics for all instances."""
    set_context(replace(get_context(), verbose=verbose))


@contextmanager
def output_context(**kwargs) -> Generator[OutputContext, None, None]:
    """
    Context manager for temporarily setting the output context.

    Args:
        **kwargs: Arguments to pass to OutputContext constructor.

    Yields:
        The created OutputContext.

    Example:
        with output_context(verbose=False):
            PathSet.files_only("build/**/*.map").delete()
        # Previous context restored
    """
    global _current_context
    previous = _current_context

    ctx = OutputContext(**kwargs)
    _current_context = ctx

    try:
        yield ctx
    finally:
        _current_context = previous
