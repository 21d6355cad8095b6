"""Main interactive event loop for the terminal UI.

Polls for keys with a bounded wait, applies the bound navigation action, and
redraws only when the state changed or the terminal was resized.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..content.model import AppData
from ..input import KeyMap, apply_action, default_key_map, read_key
from ..state import NavigationState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = 200


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected side effects used by ``run_main_loop``.

    ``render`` draws one frame for ``(columns, rows)``; ``open_url`` launches a
    URL and returns ``None`` or an error message.
    """

    render: Callable[[int, int], None]
    open_url: Callable[[str], str | None]


def run_main_loop(
    data: AppData,
    state: NavigationState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
    key_map: KeyMap | None = None,
) -> None:
    """Run the interactive loop until a quit key (or Ctrl-C) is received."""
    key_map = default_key_map() if key_map is None else key_map
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True

            if state.dirty:
                callbacks.render(term.columns, term.lines)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                break
            if key == "":
                continue

            # Terminals may send CR LF for one Enter press.
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            action = key_map.lookup(key)
            if action is None:
                continue
            if apply_action(action, data, state, callbacks.open_url):
                break
            state.dirty = True
