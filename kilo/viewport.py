"""Vertical scroll bookkeeping.

``scroll_row_offset`` is the only writer of ``ViewerState.row_offset`` and runs
once per frame before composition.
"""

from __future__ import annotations

from .state import ViewerState


def scroll_row_offset(cy: int, row_offset: int, screenrows: int) -> int:
    """Return the row offset that keeps document row ``cy`` on screen."""
    if cy < row_offset:
        row_offset = cy
    if cy >= row_offset + screenrows:
        row_offset = cy - screenrows + 1
    return row_offset


def apply_scroll(state: ViewerState) -> None:
    state.row_offset = scroll_row_offset(state.cy, state.row_offset, state.screenrows)
