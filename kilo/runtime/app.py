"""Runtime composition layer for the viewer.

Acquires the terminal, measures the window, builds session state, and runs
the event loop inside the raw-mode scope.
"""

from __future__ import annotations

import contextlib
import logging
import signal
import sys

from ..document import Document
from ..state import ViewerState
from ..terminal import TerminalController
from .loop import run_main_loop

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


@contextlib.contextmanager
def exit_on_termination_signals():
    """Turn SIGTERM/SIGHUP into ``SystemExit(1)`` so cleanup code still runs."""

    def _raise_exit(signum: int, _frame) -> None:
        logger.warning("terminating on signal %d", signum)
        raise SystemExit(1)

    previous = {signum: signal.signal(signum, _raise_exit) for signum in TERMINATION_SIGNALS}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def run_viewer(
    document: Document,
    *,
    read_timeout_ms: int = 100,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Show ``document`` until the user quits."""
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd, read_timeout_ms=read_timeout_ms)
    with exit_on_termination_signals(), terminal.raw_mode():
        screenrows, screencols = terminal.get_window_size()
        logger.info("viewer started: %d rows x %d cols", screenrows, screencols)
        state = ViewerState(document=document, screenrows=screenrows, screencols=screencols)
        run_main_loop(state, terminal)
