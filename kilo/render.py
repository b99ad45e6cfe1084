"""Frame composition and screen refresh.

A frame is assembled fully in memory and handed to the terminal in one write
so the screen never shows a half-drawn update.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import __version__, ansi
from .state import ViewerState
from .viewport import apply_scroll

if TYPE_CHECKING:
    from .terminal import TerminalController

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = f"Kilo editor -- version {__version__}"
FILLER = b"~"


def welcome_row(screencols: int) -> bytes:
    """Return the welcome banner centered in ``screencols`` columns.

    The banner is truncated on narrow terminals; when there is padding, its
    first cell is the ``~`` filler marker.
    """
    message = WELCOME_MESSAGE.encode("ascii")[: max(0, screencols)]
    padding = (screencols - len(message)) // 2
    out: list[bytes] = []
    if padding > 0:
        out.append(FILLER)
        padding -= 1
    out.append(b" " * padding)
    out.append(message)
    return b"".join(out)


def draw_rows(state: ViewerState) -> list[bytes]:
    """Return the visible rows, each cleared to end of line."""
    document = state.document
    out: list[bytes] = []
    for y in range(state.screenrows):
        file_row = y + state.row_offset
        if file_row >= document.num_rows:
            if document.num_rows == 0 and y == state.screenrows // 3:
                out.append(welcome_row(state.screencols))
            else:
                out.append(FILLER)
        else:
            out.append(document[file_row].chars[: state.screencols])
        out.append(ansi.CLEAR_LINE)
        if y < state.screenrows - 1:
            out.append(ansi.LINE_BREAK)
    return out


def build_frame(state: ViewerState) -> bytes:
    """Compose one full-screen update for the current ``row_offset``."""
    out: list[bytes] = [ansi.HIDE_CURSOR, ansi.CURSOR_HOME]
    out.extend(draw_rows(state))
    out.append(ansi.cursor_position(state.cy - state.row_offset + 1, state.cx + 1))
    out.append(ansi.SHOW_CURSOR)
    return b"".join(out)


def refresh_screen(state: ViewerState, terminal: TerminalController) -> bytes:
    """Scroll, compose, and emit one frame; returns the bytes composed."""
    apply_scroll(state)
    frame = build_frame(state)
    written = terminal.write(frame)
    if written != len(frame):
        # Short writes are not retried; the next frame repaints everything.
        logger.warning("short frame write: %d of %d bytes", written, len(frame))
    return frame
