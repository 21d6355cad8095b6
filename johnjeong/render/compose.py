"""Turn planned draw operations into one ANSI frame payload."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..ui_theme import UITheme

if TYPE_CHECKING:
    from . import DrawOp

CLEAR_SCREEN = "\033[H\033[J"


def cursor_to(x: int, y: int) -> str:
    """CUP sequence for 0-based column ``x`` and row ``y``."""
    return f"\033[{y + 1};{x + 1}H"


def compose_frame(ops: Iterable[DrawOp], columns: int, rows: int, theme: UITheme) -> str:
    """Clear the screen and replay ``ops`` in order.

    Operations outside the ``columns`` x ``rows`` surface are dropped and text
    running past the right edge is cut, so a frame never scrolls the terminal.
    """
    out: list[str] = [CLEAR_SCREEN]
    for op in ops:
        if op.y < 0 or op.y >= rows or op.x < 0 or op.x >= columns:
            continue
        text = op.text[: columns - op.x]
        if not text:
            continue
        sgr = theme.sgr_for(op.style)
        out.append(cursor_to(op.x, op.y))
        if sgr:
            out.append(sgr)
            out.append(text)
            out.append(theme.reset)
        else:
            out.append(text)
    return "".join(out)
