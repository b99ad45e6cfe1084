"""Command-line front door for kilo.

Parses the optional file argument, loads the document and config, then hands
off to the interactive runtime. Fatal errors are reported here, once.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

from . import ansi
from .config import load_config, load_log_file, load_log_level, load_read_timeout_ms
from .document import Document, load_document
from .errors import TerminalError
from .runtime import run_viewer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: dict[str, object]) -> None:
    """Attach a file handler to the ``kilo`` logger when a log file is set."""
    log_file = load_log_file(config)
    if log_file is None:
        return
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        sys.stderr.write(f"kilo: cannot open log file {log_file}: {exc}\n")
        return
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("kilo")
    package_logger.addHandler(handler)
    package_logger.setLevel(load_log_level(config))


def die(exc: TerminalError) -> NoReturn:
    """Leave a clean screen, report ``exc`` perror-style, and exit with 1.

    Safe to call before raw mode was ever entered.
    """
    try:
        os.write(sys.stdout.fileno(), ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)
    except OSError as write_exc:
        logger.debug("could not clear screen while dying: %s", write_exc)
    logger.error("fatal: %s", exc)
    sys.stderr.write(f"{exc}\n")
    sys.stderr.flush()
    raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer on an optional file."""
    parser = argparse.ArgumentParser(
        prog="kilo",
        description="View a text file in the terminal. Arrows or h/j/k/l move, Ctrl-Q quits.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Text file to open read-only.")
    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(config)

    try:
        document = load_document(Path(args.path)) if args.path is not None else Document.empty()
        run_viewer(document, read_timeout_ms=load_read_timeout_ms(config))
    except TerminalError as exc:
        die(exc)


if __name__ == "__main__":
    main()
