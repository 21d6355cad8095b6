"""Static content model shown by the viewer.

Everything here is built once before the interactive loop starts and is
read-only afterwards. Tabs are a closed two-variant union: ``AboutTab`` and
``ListingTab``. Callers dispatch on the variant with ``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Link:
    label: str
    url: str


@dataclass(frozen=True)
class Entry:
    """One post or gallery image inside a listing tab."""

    title: str
    date: str
    body: str
    url: str
    sort_key: str


@dataclass(frozen=True)
class AboutTab:
    tagline: str
    links: tuple[Link, ...]


@dataclass(frozen=True)
class ListingTab:
    """Named listing whose entries are ordered by descending ``sort_key``."""

    name: str
    description: str
    entries: tuple[Entry, ...]

    @classmethod
    def sorted(cls, name: str, description: str, entries) -> ListingTab:
        """Build a listing with entries sorted newest-first by ``sort_key``."""
        ordered = sorted(entries, key=lambda entry: entry.sort_key, reverse=True)
        return cls(name=name, description=description, entries=tuple(ordered))


Tab = Union[AboutTab, ListingTab]


@dataclass(frozen=True)
class Header:
    title: str
    subtitle: str


@dataclass(frozen=True)
class AppData:
    header: Header
    tabs: tuple[Tab, ...]


ABOUT_TAGLINE = "I like simple & intuitive stuff."

ABOUT_LINKS: tuple[Link, ...] = (
    Link(label="LinkedIn", url="https://www.linkedin.com/in/johntopia/"),
    Link(label="X (Twitter)", url="https://x.com/computeless"),
    Link(label="GitHub", url="https://github.com/ComputelessComputer"),
    Link(label="Email", url="mailto:john@hyprnote.com"),
)


def tab_name(tab: Tab) -> str:
    if isinstance(tab, AboutTab):
        return "About"
    return tab.name


def tab_label(index: int, tab: Tab) -> str:
    """Return the tab-bar label, numbered from 1 to match the digit hotkeys."""
    return f"{index + 1}. {tab_name(tab)}"


def tab_item_count(tab: Tab) -> int:
    """Return how many selectable rows ``tab`` has (links or entries)."""
    if isinstance(tab, AboutTab):
        return len(tab.links)
    return len(tab.entries)


def selected_target(tab: Tab, index: int) -> tuple[str, str] | None:
    """Return ``(label, url)`` for the selected row, or ``None`` when empty.

    Links are labelled by their label, entries by their title.
    """
    if isinstance(tab, AboutTab):
        if 0 <= index < len(tab.links):
            link = tab.links[index]
            return link.label, link.url
        return None
    if 0 <= index < len(tab.entries):
        entry = tab.entries[index]
        return entry.title, entry.url
    return None
