"""Shared key constants and helpers."""

from __future__ import annotations

ESC_KEY = "ESC"
QUIT_KEY = "CTRL_Q"


def ctrl_key(ch: str) -> int:
    """Return the byte value a terminal sends for Ctrl+``ch``."""
    return ord(ch) & 0x1F


CONTROL_TOKENS: dict[bytes, str] = {
    bytes([ctrl_key("q")]): QUIT_KEY,
}
