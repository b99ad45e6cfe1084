"""Terminal control helpers for the viewer session.

Owns the raw-mode lifecycle: the attribute snapshot, the ``atexit``
restoration hook, and window-size discovery with a cursor-report fallback.
"""

from __future__ import annotations

import atexit
import contextlib
import logging
import os
import sys
import termios
import tty

from . import ansi
from .errors import TerminalError
from .input.reader import read_ready_byte

logger = logging.getLogger(__name__)

CURSOR_REPORT_MAX_BYTES = 31


def _termios_error(label: str, exc: termios.error) -> TerminalError:
    errno = exc.args[0] if exc.args and isinstance(exc.args[0], int) else None
    strerror = exc.args[1] if len(exc.args) > 1 else None
    return TerminalError(label, errno, strerror)


def raw_attributes(saved: list, vtime: int) -> list:
    """Return a raw-mode copy of ``saved`` termios attributes.

    Disables flow control, CR/LF translation, parity checks, bit stripping,
    output post-processing, echo, canonical input, extended input processing,
    and signal keys. Reads return after ``vtime`` tenths of a second with
    zero bytes required.
    """
    attrs = list(saved)
    attrs[tty.CC] = list(saved[tty.CC])
    attrs[tty.IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    attrs[tty.OFLAG] &= ~termios.OPOST
    attrs[tty.CFLAG] |= termios.CS8
    attrs[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    attrs[tty.CC][termios.VMIN] = 0
    attrs[tty.CC][termios.VTIME] = vtime
    return attrs


class TerminalController:
    """Manage raw-mode transitions and terminal geometry queries."""

    def __init__(self, stdin_fd: int, stdout_fd: int, read_timeout_ms: int = 100) -> None:
        """Capture tty state and register its restoration before anything else."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.read_timeout_ms = read_timeout_ms
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise _termios_error("tcgetattr", exc) from exc
        self._raw_active = False
        atexit.register(self._restore_at_exit)

    @property
    def raw_active(self) -> bool:
        return self._raw_active

    def enable_raw_mode(self) -> None:
        attrs = raw_attributes(self._saved_tty_state, max(1, self.read_timeout_ms // 100))
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, attrs)
        except termios.error as exc:
            raise _termios_error("tcsetattr", exc) from exc
        self._raw_active = True
        logger.debug("raw mode enabled on fd %d", self.stdin_fd)

    def disable_raw_mode(self) -> None:
        """Restore the captured attributes; later calls are no-ops."""
        if not self._raw_active:
            return
        # Cleared first so a failing restore is attempted and reported once.
        self._raw_active = False
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise _termios_error("tcsetattr", exc) from exc
        logger.debug("raw mode disabled on fd %d", self.stdin_fd)

    def _restore_at_exit(self) -> None:
        try:
            self.disable_raw_mode()
        except TerminalError as exc:
            logger.error("terminal restore failed at exit: %s", exc)
            sys.stderr.write(f"{exc}\n")
            sys.stderr.flush()
            os._exit(1)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw enter/exit calls."""
        try:
            self.enable_raw_mode()
            yield self
        finally:
            self.disable_raw_mode()

    def write(self, data: bytes, label: str = "write") -> int:
        try:
            return os.write(self.stdout_fd, data)
        except OSError as exc:
            raise TerminalError.from_os_error(label, exc) from exc

    def clear_screen(self) -> None:
        self.write(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)

    def get_window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` via ioctl, falling back to a cursor report."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = None
        if size is None or size.columns == 0:
            logger.info("window size ioctl unavailable, querying cursor position")
            return self.get_cursor_position()
        return size.lines, size.columns

    def get_cursor_position(self) -> tuple[int, int]:
        """Drive the cursor to the bottom-right corner and read its position.

        Needs raw mode so the terminal's ``ESC [ rows ; cols R`` reply reaches
        us byte by byte instead of being echoed.
        """
        failure = TerminalError("getWindowSize", None, "cannot determine window size")
        try:
            moved = os.write(self.stdout_fd, ansi.CURSOR_TO_BOTTOM_RIGHT)
            queried = os.write(self.stdout_fd, ansi.DEVICE_STATUS_REPORT)
        except OSError as exc:
            raise TerminalError.from_os_error("getWindowSize", exc) from exc
        if moved != len(ansi.CURSOR_TO_BOTTOM_RIGHT) or queried != len(ansi.DEVICE_STATUS_REPORT):
            raise failure

        response = bytearray()
        while len(response) < CURSOR_REPORT_MAX_BYTES:
            ch = read_ready_byte(self.stdin_fd, self.read_timeout_ms)
            if ch is None or ch == b"R":
                break
            if not ch:
                raise TerminalError.end_of_input("getWindowSize")
            response += ch

        parsed = ansi.parse_cursor_position_report(bytes(response))
        if parsed is None or parsed[0] <= 0 or parsed[1] <= 0:
            raise failure
        logger.info("window size from cursor report: %dx%d", parsed[0], parsed[1])
        return parsed
