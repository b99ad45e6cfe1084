"""Main interactive event loop.

Each iteration draws one frame, decodes one key, and applies it. The loop
only ends through the quit key; fatal errors propagate to the caller.
"""

from __future__ import annotations

import logging

from ..input import NormalKeyHandler, read_key
from ..render import refresh_screen
from ..state import ViewerState
from ..terminal import TerminalController

logger = logging.getLogger(__name__)


def run_main_loop(state: ViewerState, terminal: TerminalController) -> None:
    """Run until the quit key is pressed, then clear the screen."""
    handler = NormalKeyHandler(state)
    while True:
        refresh_screen(state, terminal)
        key = read_key(terminal.stdin_fd, timeout_ms=terminal.read_timeout_ms)
        if handler.handle(key):
            break
    logger.info("quit requested")
    terminal.clear_screen()
