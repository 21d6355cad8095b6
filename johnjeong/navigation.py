"""Navigation state transitions.

Every function here takes the static ``AppData`` (where needed) plus the
mutable ``NavigationState`` and updates the state in place. Transitions are
total: out-of-range requests are no-ops or clamps, never errors.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from .content.model import AppData, Tab, selected_target, tab_item_count
from .state import NavigationState

UrlOpener = Callable[[str], Optional[str]]


def active_tab(data: AppData, state: NavigationState) -> Tab | None:
    if 0 <= state.tab_index < len(data.tabs):
        return data.tabs[state.tab_index]
    return None


def list_length(data: AppData, state: NavigationState) -> int:
    tab = active_tab(data, state)
    return 0 if tab is None else tab_item_count(tab)


def switch_tab(data: AppData, state: NavigationState, index: int) -> None:
    """Activate tab ``index`` with fresh selection and scroll state.

    Out-of-range indexes leave the state untouched. Switching always clears the
    status line, even when ``index`` is already active.
    """
    if not 0 <= index < len(data.tabs):
        return
    state.tab_index = index
    state.list_index = 0
    state.list_scroll = 0
    state.content_scroll = 0
    state.content_scroll_max = 0
    state.status = None


def move_selection(data: AppData, state: NavigationState, delta: int) -> None:
    """Move the selected row by ``delta``, wrapping around at both ends."""
    total = list_length(data, state)
    if total == 0:
        state.list_index = 0
        return
    state.list_index = (state.list_index + delta) % total
    # The detail bound belongs to the previous entry until the next render.
    state.content_scroll = 0
    state.content_scroll_max = 0


def scroll_content(state: NavigationState, delta: int) -> None:
    state.content_scroll = max(0, min(state.content_scroll + delta, state.content_scroll_max))


def jump_to_top(state: NavigationState) -> None:
    state.content_scroll = 0


def jump_to_bottom(state: NavigationState) -> None:
    state.content_scroll = state.content_scroll_max


def open_selected(data: AppData, state: NavigationState, open_url: UrlOpener) -> None:
    """Open the selected link or entry and report the outcome in ``status``.

    ``open_url`` returns ``None`` on success or an error description. Nothing
    happens when the active tab has no rows.
    """
    tab = active_tab(data, state)
    if tab is None:
        return
    target = selected_target(tab, state.list_index)
    if target is None:
        return
    label, url = target
    error = open_url(url)
    if error is None:
        state.status = f"Opened {label}"
    else:
        state.status = f"Failed to open {label} ({error})"


def clamp_list_scroll(scroll: int, index: int, height: int, total: int) -> int:
    """Return a list scroll offset that keeps ``index`` inside the window.

    The window is ``height`` rows tall over ``total`` rows. When everything
    fits the offset is 0; otherwise the offset follows the selection up or
    down just far enough and never scrolls past ``total - height``.
    """
    if total <= height:
        return 0
    if index < scroll:
        return index
    if index >= scroll + height:
        return max(0, index - max(0, height - 1))
    return min(scroll, max(0, total - height))


def sync_list_scroll(state: NavigationState, height: int, total: int) -> None:
    """Render-time update of ``list_scroll`` for the current list geometry."""
    state.list_scroll = clamp_list_scroll(state.list_scroll, state.list_index, height, total)


def recompute_content_scroll_bound(state: NavigationState, line_count: int, available: int) -> None:
    """Render-time update of the detail scroll bound.

    Only the render step knows how many wrapped body lines exist and how many
    rows are free for them, so it reports both here. ``content_scroll`` is
    pulled back inside the new bound.
    """
    state.content_scroll_max = max(0, line_count - max(0, available))
    if state.content_scroll > state.content_scroll_max:
        state.content_scroll = state.content_scroll_max
