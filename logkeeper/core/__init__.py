"""Core building blocks.

This package provides the pieces shared by the session logger:
- levels: LogLevel enumeration
- config: Valves settings model and the diagnostic LOGGER
- errors: exception taxonomy for sink failures
- formatting: LogEntry and timestamp rendering
"""

from __future__ import annotations

from .config import LOGGER, Valves
from .errors import (
    LogDirectoryError,
    LogKeeperError,
    SessionClosedError,
    SinkCloseError,
    SinkError,
    SinkOpenError,
    SinkWriteError,
)
from .formatting import LogEntry, format_filename_timestamp, format_line_timestamp, session_filename
from .levels import LogLevel

__all__ = [
    "LOGGER",
    "Valves",
    "LogKeeperError",
    "SessionClosedError",
    "SinkError",
    "LogDirectoryError",
    "SinkOpenError",
    "SinkWriteError",
    "SinkCloseError",
    "LogEntry",
    "format_filename_timestamp",
    "format_line_timestamp",
    "session_filename",
    "LogLevel",
]
