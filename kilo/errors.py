"""Fatal error type shared by terminal, input, and document code.

Every failure the viewer cannot recover from is raised as ``TerminalError``
and reported once by the CLI die path.
"""

from __future__ import annotations

import errno as errno_mod
import os


class TerminalError(OSError):
    """OS-level failure tagged with the operation that produced it."""

    def __init__(self, label: str, errno: int | None = None, strerror: str | None = None) -> None:
        if strerror is None:
            strerror = os.strerror(errno) if errno else "unknown error"
        super().__init__(errno if errno is not None else 0, strerror)
        self.label = label

    @classmethod
    def from_os_error(cls, label: str, exc: OSError) -> TerminalError:
        """Wrap ``exc`` keeping its errno and description."""
        return cls(label, exc.errno, exc.strerror or str(exc))

    @classmethod
    def end_of_input(cls, label: str = "read") -> TerminalError:
        return cls(label, errno_mod.EIO, "end of input")

    def __str__(self) -> str:
        return f"{self.label}: {self.strerror}"
