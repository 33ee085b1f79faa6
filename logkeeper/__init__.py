"""Session-based file logger.

Each process session writes leveled, timestamped lines to one file named
``<LOG_DIR>/yyyy-MM-dd_HH-mm-ss.log``:

- keeper: process-wide LogKeeper facade and module-level shortcuts
- logging: SessionLogger owning the file sink
- core: levels, settings, errors and formatting
"""

from __future__ import annotations

from .core.config import LOGGER, Valves
from .core.errors import (
    LogDirectoryError,
    LogKeeperError,
    SessionClosedError,
    SinkCloseError,
    SinkError,
    SinkOpenError,
    SinkWriteError,
)
from .core.formatting import LogEntry
from .core.levels import LogLevel
from .keeper import (
    LogKeeper,
    close,
    configure,
    critical,
    emit,
    error,
    get_keeper,
    info,
    save_logs,
    warning,
)
from .logging.session_logger import SessionLogger, SessionState

__version__ = "0.1.0"

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
    "LogLevel",
    "LogKeeper",
    "SessionLogger",
    "SessionState",
    "get_keeper",
    "configure",
    "emit",
    "info",
    "warning",
    "error",
    "critical",
    "close",
    "save_logs",
]
