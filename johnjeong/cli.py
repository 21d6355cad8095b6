"""Command-line front door for johnjeong.

Handles ``--help`` and ``--version``, sets up logging, then dispatches into
the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .logs import configure_logging
from .render.help import usage_text
from .runtime import run_viewer

PROG = "johnjeong"


class _UsageAction(argparse.Action):
    """``--help`` printing the viewer usage and key table."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(usage_text(parser.prog))
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("-h", "--help", action=_UsageAction, help="Show usage and key bindings.")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG} {__version__}",
        help="Show version and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer."""
    build_parser().parse_args(argv)
    configure_logging()
    run_viewer()


if __name__ == "__main__":
    main()
