"""Low-level terminal input decoding.

Reads raw bytes from the terminal and translates them into key tokens.
Each call decodes one key; no bytes are carried over between calls.
"""

from __future__ import annotations

import os
import select

from ..ansi import ESC
from ..errors import TerminalError
from .key_common import CONTROL_TOKENS, ESC_KEY

DEFAULT_TIMEOUT_MS = 100

ARROW_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}


def read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    """Read one byte, waiting at most ``timeout_ms``.

    Returns ``None`` when nothing arrived in time and ``b""`` at end of input.
    Any other read failure is raised as ``TerminalError``.
    """
    try:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
        return os.read(fd, 1)
    except BlockingIOError:
        return None
    except OSError as exc:
        raise TerminalError.from_os_error("read", exc) from exc


def read_key(fd: int, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> str:
    """Block until one key is available and return its token.

    Plain bytes decode to one-character strings, Ctrl+Q to ``"CTRL_Q"``, and
    ``ESC [ A..D`` to ``"UP"``/``"DOWN"``/``"RIGHT"``/``"LEFT"``. An escape
    byte whose two follow-up bytes are missing or unrecognized is ``"ESC"``.
    """
    while True:
        ch = read_ready_byte(fd, timeout_ms)
        if ch is None:
            continue
        if not ch:
            raise TerminalError.end_of_input()
        break

    if ch != ESC:
        token = CONTROL_TOKENS.get(ch)
        if token is not None:
            return token
        return ch.decode("latin-1")

    first = read_ready_byte(fd, timeout_ms)
    if not first:
        return ESC_KEY
    second = read_ready_byte(fd, timeout_ms)
    if not second:
        return ESC_KEY
    if first == b"[":
        return ARROW_TOKENS.get(second, ESC_KEY)
    return ESC_KEY
