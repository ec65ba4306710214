"""Command-line front door for filet.

Parses the optional start directory, reads the environment once, sets up file
logging, and runs the browser. Terminal failures become exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_browser
from .config import Config
from .errors import FiletError
from .log import configure_logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filet",
        description="Browse a directory in a full-screen terminal view.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Level for the log file (default: WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` and run the browser; return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    path = Path(args.path) if args.path is not None else Path.cwd()
    config = Config.from_environment()
    try:
        run_browser(config, path, no_color=args.no_color)
    except FiletError as exc:
        logger.error("%s", exc)
        print(f"filet: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
