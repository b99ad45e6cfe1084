"""Key-token dispatch table used by the viewer's key handler.

Tokens come straight from ``read_key`` (``"UP"``, ``"h"``, ``"CTRL_Q"``...);
several tokens may share one action, which is how the vi aliases work.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens that all trigger ``handler``; the handler returns should-quit."""

    combos: tuple[str, ...]
    handler: Callable[[], bool]


class KeyComboRegistry:
    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Bind every token of ``binding``; a later binding replaces an earlier one."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the action for ``key``.

        Returns the action's quit flag, or ``None`` for tokens the viewer
        ignores (plain text bytes, bare escapes, unbound control keys).
        """
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()
