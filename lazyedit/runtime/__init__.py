"""Public runtime orchestration entry points.

``run_editor`` is imported lazily so that ``lazyedit.runtime.config`` can be
used by core modules without pulling in the terminal loop.
"""

from __future__ import annotations


def run_editor(*args, **kwargs):
    """Lazily import the editor entrypoint to avoid package-import cycles."""
    from .app import run_editor as _run_editor

    return _run_editor(*args, **kwargs)


__all__ = ["run_editor"]
