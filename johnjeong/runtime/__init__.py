"""Interactive viewer runtime: terminal control, config, and the event loop.

Only ``run_viewer`` is exported here, imported lazily so ``--help`` and
``--version`` never touch termios.
"""

from __future__ import annotations


def run_viewer() -> None:
    from .app import run_viewer as _run_viewer

    _run_viewer()


__all__ = ["run_viewer"]
