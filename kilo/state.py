"""Session state owned by the event loop."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document


@dataclass
class ViewerState:
    """Document, cursor, and viewport for one viewer session.

    ``cx``/``cy`` are document coordinates; ``cy`` may equal
    ``document.num_rows`` (the line past the end). ``row_offset`` is the first
    document row shown at the top of the screen.
    """

    document: Document
    screenrows: int
    screencols: int
    cx: int = 0
    cy: int = 0
    row_offset: int = 0
