"""VT100 control sequences written to and parsed from the terminal.

Sequences are bytes because frames are assembled from raw document rows.
"""

from __future__ import annotations

import re

ESC = b"\x1b"
CLEAR_SCREEN = b"\x1b[2J"
CURSOR_HOME = b"\x1b[H"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CLEAR_LINE = b"\x1b[K"
CURSOR_TO_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"
DEVICE_STATUS_REPORT = b"\x1b[6n"
LINE_BREAK = b"\r\n"

CURSOR_POSITION_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)")


def cursor_position(row: int, col: int) -> bytes:
    """Return the move-cursor sequence for 1-based ``row``/``col``."""
    return b"\x1b[%d;%dH" % (row, col)


def parse_cursor_position_report(response: bytes) -> tuple[int, int] | None:
    """Parse ``ESC [ rows ; cols`` (terminator already stripped)."""
    match = CURSOR_POSITION_REPORT_RE.fullmatch(response)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))
