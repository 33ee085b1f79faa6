"""Exception types raised by the session logger.

Sink failures never escape ``emit``; they are reported on the diagnostic
channel and the entry is dropped. ``close`` re-raises ``SinkCloseError`` so
callers awaiting a flush learn that it did not complete.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LogKeeperError(Exception):
    """Base class for logkeeper errors."""


class SessionClosedError(LogKeeperError):
    """Raised when an operation needs an open session but it was closed."""


class SinkError(LogKeeperError):
    """A failure of the file sink backing a session."""

    operation = "access"

    def __init__(self, path: Optional[Path], message: str = "") -> None:
        self.path = path
        detail = message or f"Failed to {self.operation} log sink"
        if path is not None:
            detail = f"{detail} ({path})"
        super().__init__(detail)


class LogDirectoryError(SinkError):
    operation = "create log directory for"


class SinkOpenError(SinkError):
    operation = "open"


class SinkWriteError(SinkError):
    operation = "write to"


class SinkCloseError(SinkError):
    operation = "flush and close"
