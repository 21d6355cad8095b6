"""Key help shown in the footer and in ``--help`` output."""

from __future__ import annotations

HELP_LINE = (
    "↑/↓ or j/k move  •  o/enter open  •  pgup/pgdn scroll  •  "
    "1-6 tabs (g gallery)  •  q quit"
)

KEY_HELP_ROWS: tuple[tuple[str, str], ...] = (
    ("1-6", "switch tabs"),
    ("g", "gallery tab"),
    ("↑/↓ j/k", "move selection"),
    ("pgup/dn", "scroll content"),
    ("home/t G", "content top / bottom"),
    ("o/enter", "open link"),
    ("q/esc", "quit"),
)


def usage_text(prog: str = "johnjeong") -> str:
    """Return the full ``--help`` text: usage, keys, and content hint."""
    width = max(len(key) for key, _ in KEY_HELP_ROWS)
    lines = [
        f"{prog} - terminal edition",
        "",
        "Usage:",
        f"  {prog}",
        f"  {prog} --help",
        f"  {prog} --version",
        "",
        "Keys:",
    ]
    lines.extend(f"  {key.ljust(width)}  {meaning}" for key, meaning in KEY_HELP_ROWS)
    lines.extend(
        [
            "",
            "Content:",
            "  Set JOHNJEONG_CONTENT_DIR to a part-of-my-brain directory.",
        ]
    )
    return "\n".join(lines) + "\n"
