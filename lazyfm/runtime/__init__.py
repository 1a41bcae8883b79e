"""Browser runtime: navigation state machine, actions, config, and loop.

The interactive loop is imported lazily to avoid package-import cycles with
the render package.
"""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the loop entrypoint."""
    from .loop import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = [
    "run_browser",
]
