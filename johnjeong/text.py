"""Plain-text shaping for list labels and post bodies.

``truncate`` clips single-line labels with an ellipsis. ``wrap`` turns a post
body into display lines, keeping paragraph breaks and bullet hanging indents.
Both are pure and never raise.
"""

from __future__ import annotations

ELLIPSIS = "…"
MIN_WRAP_WIDTH = 10
BULLET_MARKERS: tuple[str, ...] = ("- ", "* ")


def truncate(text: str, max_width: int) -> str:
    """Clip ``text`` to ``max_width`` characters, ending with ``…`` when cut."""
    if len(text) <= max_width:
        return text
    keep = max(1, max_width) - 1
    return text[:keep] + ELLIPSIS


def format_date(date: str) -> str:
    """Return the ``YYYY-MM-DD`` part of an ISO-like date string."""
    return date[:10]


def wrap_line(text: str, width: int, prefix: str = "") -> list[str]:
    """Greedily pack words of one source line into lines of ``width``.

    ``prefix`` starts the first output line; continuation lines get an indent of
    the same length. A line with no words still yields ``[prefix]``.
    """
    indent = " " * len(prefix)
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = (indent if lines else prefix) + word
            continue
        if len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = indent + word
    if current:
        lines.append(current)
    if not lines:
        lines.append(prefix)
    return lines


def wrap(body: str, width: int) -> list[str]:
    """Wrap a post body into display lines no wider than ``width``.

    Source lines break only on ``\\n`` and ``\\r\\n``. ``width`` is floored at
    ``MIN_WRAP_WIDTH``. Blank source lines become a single empty line. Lines
    starting with ``- `` or ``* `` keep the marker on their first line and
    indent continuations by two spaces. A single word longer than ``width`` is
    never split and takes a line of its own.
    """
    width = max(MIN_WRAP_WIDTH, width)
    lines: list[str] = []
    raw_lines = body.split("\n")
    # A trailing newline does not start another line.
    if raw_lines[-1] == "":
        raw_lines.pop()
    for raw in raw_lines:
        raw = raw.removesuffix("\r")
        if not raw.strip():
            lines.append("")
            continue
        trimmed = raw.rstrip()
        if trimmed.startswith(BULLET_MARKERS):
            lines.extend(wrap_line(trimmed[2:], width, trimmed[:2]))
        else:
            lines.extend(wrap_line(trimmed, width))
    return lines
