"""Content model and filesystem loader for the viewer tabs."""

from __future__ import annotations

from .loader import build_app_data
from .model import (
    AboutTab,
    AppData,
    Entry,
    Header,
    Link,
    ListingTab,
    Tab,
    selected_target,
    tab_item_count,
    tab_label,
    tab_name,
)

__all__ = [
    "AboutTab",
    "AppData",
    "Entry",
    "Header",
    "Link",
    "ListingTab",
    "Tab",
    "build_app_data",
    "selected_target",
    "tab_item_count",
    "tab_label",
    "tab_name",
]
