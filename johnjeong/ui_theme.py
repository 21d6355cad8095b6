"""UI theme definitions and selection helpers.

The render planner tags every draw operation with a semantic style name. A
theme maps those names to ANSI SGR sequences when the frame is composed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame composer."""

    name: str
    reset: str
    plain: str
    bold: str
    dim: str
    tab_active: str
    row: str
    row_selected: str

    def sgr_for(self, style: str) -> str:
        """Return the SGR prefix for ``style``; unknown styles draw unstyled."""
        return getattr(self, style, "") if style in STYLE_NAMES else ""


STYLE_NAMES: frozenset[str] = frozenset({"plain", "bold", "dim", "tab_active", "row", "row_selected"})


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    plain="",
    bold="\033[1m",
    dim="\033[90m",
    tab_active="\033[4m",
    row="\033[37m",
    row_selected="\033[30;47m",
)

# Attributes only, no colors.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    plain="",
    bold="\033[1m",
    dim="",
    tab_active="\033[4m",
    row="",
    row_selected="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the requested theme, the default when unknown, plain when ``no_color``."""
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    theme = _THEMES.get(name.strip().lower())
    if theme is None:
        logger.warning("unknown theme %r, expected one of %s", name, ", ".join(available_theme_names()))
        return DEFAULT_THEME
    return theme
