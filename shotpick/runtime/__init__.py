"""Public runtime orchestration entry points.

This package groups the interactive picker bootstrap (`run_picker`) and the
lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks


def run_picker(*args, **kwargs):
    """Lazily import picker entrypoint to avoid terminal imports on package import."""
    from .app import run_picker as _run_picker

    return _run_picker(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_picker",
    "RuntimeLoopCallbacks",
    "run_main_loop",
]
