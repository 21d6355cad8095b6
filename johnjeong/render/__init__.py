"""Frame planner for the tabbed viewer.

``plan_frame`` turns the static content plus navigation state into an ordered
list of positioned draw operations. It never fails: every size computation
saturates at zero, so tiny terminals just show less.

Planning has one deliberate side effect. The list scroll window and the detail
scroll bound depend on the terminal size and on the wrapped body, so the
planner writes them back into ``NavigationState`` through
``sync_list_scroll`` and ``recompute_content_scroll_bound``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..content.model import AboutTab, AppData, ListingTab, tab_label
from ..navigation import active_tab, recompute_content_scroll_bound, sync_list_scroll
from ..state import NavigationState
from ..text import format_date, truncate, wrap
from ..ui_theme import UITheme
from .compose import compose_frame
from .help import HELP_LINE

LEFT_MARGIN = 2
HORIZONTAL_MARGIN = 4
HEADER_TITLE_ROW = 1
HEADER_SUBTITLE_ROW = 2
TAB_BAR_ROW = 4
TAB_GAP = 3
CONTENT_TOP = 6
LINK_INDENT = 4
LIST_WIDTH_RATIO = 0.33
LIST_WIDTH_MIN = 24
LIST_WIDTH_MAX = 38
PANE_GUTTER = 2
DETAIL_MIN_WIDTH = 10
# Rows kept free below a scrolling region: status line, help line, last row.
FOOTER_ROWS = 3
SELECTED_MARKER = "›"
LIST_CAPTION = "Posts"
EMPTY_LIST_TEXT = "No posts found."
EMPTY_DETAIL_TEXT = "Select a post to read."


@dataclass(frozen=True)
class DrawOp:
    """Write ``text`` at column ``x``, row ``y`` (0-based) in ``style``."""

    x: int
    y: int
    text: str
    style: str = "plain"


@dataclass(frozen=True)
class FrameLayout:
    columns: int
    rows: int
    usable_width: int
    content_top: int
    status_row: int
    help_row: int


@dataclass(frozen=True)
class ListingGeometry:
    list_x: int
    list_y: int
    list_width: int
    list_height: int
    detail_x: int
    detail_width: int


def _sat(value: int) -> int:
    return max(0, value)


def compute_frame_layout(columns: int, rows: int) -> FrameLayout:
    """Split the terminal into header, tab bar, content, status and help rows."""
    columns = _sat(columns)
    rows = _sat(rows)
    return FrameLayout(
        columns=columns,
        rows=rows,
        usable_width=_sat(columns - HORIZONTAL_MARGIN),
        content_top=CONTENT_TOP,
        status_row=_sat(rows - 3),
        help_row=_sat(rows - 2),
    )


def list_height_below(layout: FrameLayout, list_y: int) -> int:
    """Visible rows for a list starting at ``list_y`` above the footer."""
    return _sat(layout.rows - (list_y + FOOTER_ROWS))


def about_list_top(layout: FrameLayout) -> int:
    return layout.content_top + 2


def listing_geometry(layout: FrameLayout) -> ListingGeometry:
    """Place the list pane and detail pane of a listing tab.

    The list takes a third of the usable width clamped to ``[24, 38]``; the
    detail pane gets the rest after a two-column gutter, never under 10.
    """
    list_x = LEFT_MARGIN
    list_y = layout.content_top + 3
    list_width = int(layout.usable_width * LIST_WIDTH_RATIO)
    list_width = max(LIST_WIDTH_MIN, min(LIST_WIDTH_MAX, list_width))
    detail_x = min(list_x + list_width + PANE_GUTTER, layout.usable_width)
    detail_width = max(_sat(layout.usable_width - (detail_x + 1)), DETAIL_MIN_WIDTH)
    return ListingGeometry(
        list_x=list_x,
        list_y=list_y,
        list_width=list_width,
        list_height=list_height_below(layout, list_y),
        detail_x=detail_x,
        detail_width=detail_width,
    )


def _row_text(selected: bool, label: str) -> str:
    return f"{SELECTED_MARKER if selected else ' '} {label}"


def entry_label(title: str, date: str) -> str:
    if not date:
        return title
    return f"{format_date(date)} {title}"


def _plan_header(data: AppData, layout: FrameLayout, ops: list[DrawOp]) -> None:
    header = data.header
    ops.append(DrawOp(LEFT_MARGIN, HEADER_TITLE_ROW, truncate(header.title, layout.usable_width), "bold"))
    ops.append(DrawOp(LEFT_MARGIN, HEADER_SUBTITLE_ROW, truncate(header.subtitle, layout.usable_width), "dim"))


def _plan_tab_bar(data: AppData, state: NavigationState, layout: FrameLayout, ops: list[DrawOp]) -> None:
    right_edge = LEFT_MARGIN + layout.usable_width
    x = LEFT_MARGIN
    for idx, tab in enumerate(data.tabs):
        room = right_edge - x
        if room <= 0:
            break
        label = tab_label(idx, tab)
        style = "tab_active" if idx == state.tab_index else "plain"
        ops.append(DrawOp(x, TAB_BAR_ROW, truncate(label, room), style))
        x += len(label) + TAB_GAP


def _plan_about(
    tab: AboutTab,
    state: NavigationState,
    layout: FrameLayout,
    ops: list[DrawOp],
) -> None:
    ops.append(DrawOp(LEFT_MARGIN, layout.content_top, truncate(tab.tagline, layout.usable_width)))

    list_y = about_list_top(layout)
    list_height = list_height_below(layout, list_y)
    sync_list_scroll(state, list_height, len(tab.links))
    label_width = _sat(layout.usable_width - LINK_INDENT)

    visible = tab.links[state.list_scroll:state.list_scroll + list_height]
    for offset, link in enumerate(visible):
        selected = state.list_scroll + offset == state.list_index
        ops.append(
            DrawOp(
                LINK_INDENT,
                list_y + offset,
                _row_text(selected, truncate(link.label, label_width)),
                "row_selected" if selected else "row",
            )
        )
    # The about page has no detail pane to scroll.
    recompute_content_scroll_bound(state, 0, 0)


def _plan_listing(
    tab: ListingTab,
    state: NavigationState,
    layout: FrameLayout,
    ops: list[DrawOp],
) -> None:
    ops.append(DrawOp(LEFT_MARGIN, layout.content_top, truncate(tab.name, layout.usable_width), "bold"))
    ops.append(DrawOp(LEFT_MARGIN, layout.content_top + 1, truncate(tab.description, layout.usable_width)))

    geometry = listing_geometry(layout)
    sync_list_scroll(state, geometry.list_height, len(tab.entries))
    ops.append(DrawOp(geometry.list_x, geometry.list_y - 1, LIST_CAPTION, "dim"))

    if not tab.entries:
        ops.append(DrawOp(geometry.list_x, geometry.list_y, EMPTY_LIST_TEXT, "dim"))
    label_width = _sat(geometry.list_width - 2)
    visible = tab.entries[state.list_scroll:state.list_scroll + geometry.list_height]
    for offset, entry in enumerate(visible):
        selected = state.list_scroll + offset == state.list_index
        label = truncate(entry_label(entry.title, entry.date), label_width)
        ops.append(
            DrawOp(
                geometry.list_x,
                geometry.list_y + offset,
                _row_text(selected, label),
                "row_selected" if selected else "row",
            )
        )

    _plan_detail(tab, state, layout, geometry, ops)


def _plan_detail(
    tab: ListingTab,
    state: NavigationState,
    layout: FrameLayout,
    geometry: ListingGeometry,
    ops: list[DrawOp],
) -> None:
    x = geometry.detail_x
    width = geometry.detail_width
    if not 0 <= state.list_index < len(tab.entries):
        recompute_content_scroll_bound(state, 0, 0)
        ops.append(DrawOp(x, geometry.list_y, EMPTY_DETAIL_TEXT, "dim"))
        return

    entry = tab.entries[state.list_index]
    y = geometry.list_y - 1
    ops.append(DrawOp(x, y, truncate(entry.title, width), "bold"))
    y += 1
    if entry.date:
        ops.append(DrawOp(x, y, truncate(entry.date, width), "dim"))
        y += 1

    lines = wrap(entry.body, width)
    available = _sat(layout.rows - (y + FOOTER_ROWS))
    recompute_content_scroll_bound(state, len(lines), available)
    for line in lines[state.content_scroll:state.content_scroll + available]:
        ops.append(DrawOp(x, y, truncate(line, width)))
        y += 1


def plan_frame(data: AppData, state: NavigationState, columns: int, rows: int) -> list[DrawOp]:
    """Return the draw operations for one frame, top to bottom.

    Also refreshes ``state.list_scroll``, ``state.content_scroll_max`` and,
    when it no longer fits, ``state.content_scroll``.
    """
    layout = compute_frame_layout(columns, rows)
    ops: list[DrawOp] = []
    _plan_header(data, layout, ops)
    _plan_tab_bar(data, state, layout, ops)

    tab = active_tab(data, state)
    if isinstance(tab, AboutTab):
        _plan_about(tab, state, layout, ops)
    elif isinstance(tab, ListingTab):
        _plan_listing(tab, state, layout, ops)

    if state.status:
        ops.append(DrawOp(LEFT_MARGIN, layout.status_row, truncate(state.status, layout.usable_width), "dim"))
    ops.append(DrawOp(LEFT_MARGIN, layout.help_row, truncate(HELP_LINE, layout.usable_width), "dim"))
    return ops


def render_frame(
    data: AppData,
    state: NavigationState,
    columns: int,
    rows: int,
    theme: UITheme,
    write: Callable[[bytes], object],
) -> None:
    """Plan one frame and hand the composed ANSI payload to ``write``."""
    ops = plan_frame(data, state, columns, rows)
    write(compose_frame(ops, columns, rows, theme).encode("utf-8", errors="replace"))


__all__ = [
    "DrawOp",
    "FrameLayout",
    "ListingGeometry",
    "about_list_top",
    "compute_frame_layout",
    "entry_label",
    "list_height_below",
    "listing_geometry",
    "plan_frame",
    "render_frame",
]
