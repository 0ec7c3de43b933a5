"""Command-line front door for lazyedit.

Parses the optional file argument, sets up config and logging, and runs the
editor. Terminal failures exit with status 1 after the terminal is restored.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import FatalSystemError
from .runtime import run_editor
from .runtime.config import load_settings
from .runtime.logs import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyedit",
        description="Edit a text file in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to open. Omit for an empty buffer.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the editor on the optional file path."""
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    path = Path(args.path) if args.path is not None else None
    try:
        run_editor(path, settings)
    except FatalSystemError as exc:
        logger.error("fatal: %s", exc)
        sys.stderr.write(f"lazyedit: {exc}\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
