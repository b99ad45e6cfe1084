"""Normal-mode keyboard handling.

Arrow tokens and their ``h``/``j``/``k``/``l`` aliases move the cursor inside
the document bounds; Ctrl+Q asks the loop to quit. Every other key is ignored.
"""

from __future__ import annotations

from ..state import ViewerState
from .key_common import QUIT_KEY
from .key_registry import KeyComboBinding, KeyComboRegistry

MOVE_LEFT_KEYS = ("LEFT", "h")
MOVE_RIGHT_KEYS = ("RIGHT", "l")
MOVE_UP_KEYS = ("UP", "k")
MOVE_DOWN_KEYS = ("DOWN", "j")


class NormalKeyHandler:
    """Key handler bound to one viewer session."""

    def __init__(self, state: ViewerState) -> None:
        self.state = state
        self._bindings = KeyComboRegistry().register_bindings(
            KeyComboBinding(MOVE_LEFT_KEYS, self._move_left),
            KeyComboBinding(MOVE_RIGHT_KEYS, self._move_right),
            KeyComboBinding(MOVE_UP_KEYS, self._move_up),
            KeyComboBinding(MOVE_DOWN_KEYS, self._move_down),
            KeyComboBinding((QUIT_KEY,), self._quit),
        )

    def handle(self, key: str) -> bool:
        """Handle one key and return ``True`` when the viewer should quit."""
        return bool(self._bindings.dispatch(key))

    def _move_left(self) -> bool:
        if self.state.cx > 0:
            self.state.cx -= 1
        return False

    def _move_right(self) -> bool:
        if self.state.cx < self.state.screencols - 1:
            self.state.cx += 1
        return False

    def _move_up(self) -> bool:
        if self.state.cy > 0:
            self.state.cy -= 1
        return False

    def _move_down(self) -> bool:
        if self.state.cy < self.state.document.num_rows:
            self.state.cy += 1
        return False

    @staticmethod
    def _quit() -> bool:
        return True


def handle_normal_key(key: str, state: ViewerState) -> bool:
    """Handle one key for ``state`` and return ``True`` when app should quit."""
    return NormalKeyHandler(state).handle(key)
