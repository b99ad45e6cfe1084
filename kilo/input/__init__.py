"""Input-layer public API for key decoding and key handling."""

from .key_common import ESC_KEY, QUIT_KEY, ctrl_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import NormalKeyHandler, handle_normal_key
from .reader import read_key, read_ready_byte

__all__ = [
    "ESC_KEY",
    "QUIT_KEY",
    "ctrl_key",
    "KeyComboBinding",
    "KeyComboRegistry",
    "NormalKeyHandler",
    "handle_normal_key",
    "read_key",
    "read_ready_byte",
]
