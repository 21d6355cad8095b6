"""Viewer bootstrap: load content, pick a theme, and run the event loop."""

from __future__ import annotations

import logging
import os
import sys

from ..content import build_app_data
from ..opener import open_url
from ..render import render_frame
from ..state import NavigationState
from ..ui_theme import resolve_theme
from .config import load_content_dir, load_theme_name
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 200


def run_viewer() -> None:
    """Initialize viewer state, wire subsystems, and run the event loop.

    Terminal I/O errors propagate to the caller; the raw-mode context restores
    the terminal before they do.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("johnjeong needs an interactive terminal.")

    data, status = build_app_data(configured_content_dir=load_content_dir())
    state = NavigationState(status=status)
    theme = resolve_theme(load_theme_name(), no_color="NO_COLOR" in os.environ)
    terminal = TerminalController(stdin_fd, stdout_fd)
    logger.debug("starting viewer with theme %s and %d tabs", theme.name, len(data.tabs))

    def render(columns: int, rows: int) -> None:
        render_frame(data, state, columns, rows, theme, terminal.write_frame)

    run_main_loop(
        data,
        state,
        terminal,
        stdin_fd,
        timing=RuntimeLoopTiming(poll_timeout_ms=POLL_TIMEOUT_MS),
        callbacks=RuntimeLoopCallbacks(render=render, open_url=open_url),
    )
    logger.debug("viewer exited")
