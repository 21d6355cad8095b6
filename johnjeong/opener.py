"""Launch URLs and files in the user's default application.

The launched process is detached and never waited on. Returns an error message
string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


def open_command(url: str, platform: str | None = None) -> list[str] | None:
    """Return the launcher argv for ``url`` on ``platform``, or ``None`` if unsupported."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return ["cmd", "/C", "start", "", url]
    if platform == "darwin":
        return ["open", url]
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return ["xdg-open", url]
    return None


def open_url(url: str) -> str | None:
    cmd = open_command(url)
    if cmd is None:
        logger.warning("no launcher for platform %s", sys.platform)
        return "open not supported on this OS"
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.warning("failed to launch %s: %s", cmd[0], exc)
        return exc.strerror or str(exc)
    logger.debug("launched %s for %s", cmd[0], url)
    return None
