"""In-memory document rows loaded from a plain text file.

Rows are raw bytes with line terminators stripped; no decoding happens here.
The viewer core only reads ``num_rows`` and each row's ``chars``/``size``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import TerminalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    chars: bytes

    @property
    def size(self) -> int:
        return len(self.chars)


@dataclass(frozen=True)
class Document:
    """Ordered, read-only sequence of rows."""

    rows: tuple[Row, ...] = ()

    @classmethod
    def empty(cls) -> Document:
        return cls()

    @classmethod
    def from_lines(cls, lines: list[bytes]) -> Document:
        return cls(tuple(Row(strip_line_ending(line)) for line in lines))

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def __getitem__(self, idx: int) -> Row:
        return self.rows[idx]


def strip_line_ending(line: bytes) -> bytes:
    """Drop every trailing ``\\n`` and ``\\r`` byte."""
    return line.rstrip(b"\r\n")


def split_lines(data: bytes) -> list[bytes]:
    """Split file contents into lines; a trailing newline does not add a row."""
    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return lines


def load_document(path: Path) -> Document:
    """Read ``path`` into a document, raising ``TerminalError`` on failure."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise TerminalError.from_os_error("open", exc) from exc
    document = Document.from_lines(split_lines(data))
    logger.info("loaded %s: %d rows", path, document.num_rows)
    return document
