"""Logging setup.

The viewer owns the terminal while it runs, so log records never go to
stderr. Setting ``JOHNJEONG_LOG_FILE`` sends them to that file instead.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

LOG_FILE_ENV = "JOHNJEONG_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(env: Mapping[str, str] | None = None) -> logging.Handler:
    """Attach one handler to the package logger and return it.

    A file handler at DEBUG when ``JOHNJEONG_LOG_FILE`` is set and writable,
    otherwise a ``NullHandler``.
    """
    env = os.environ if env is None else env
    package_logger = logging.getLogger("johnjeong")
    package_logger.propagate = False

    handler: logging.Handler = logging.NullHandler()
    log_path = env.get(LOG_FILE_ENV, "").strip()
    if log_path:
        try:
            handler = logging.FileHandler(os.path.expanduser(log_path), encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.setLevel(logging.DEBUG)

    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.addHandler(handler)
    return handler
