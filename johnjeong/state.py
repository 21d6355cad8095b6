from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NavigationState:
    """Mutable per-session navigation record.

    ``list_scroll`` and ``content_scroll_max`` are also rewritten by the render
    step, which is the only place the visible heights are known.
    """

    tab_index: int = 0
    list_index: int = 0
    list_scroll: int = 0
    content_scroll: int = 0
    content_scroll_max: int = 0
    status: str | None = None
    dirty: bool = True
