"""Session logger owning a single append-only log file.

This module provides the SessionLogger class which handles:
- Lazy creation of the session file on first emit
- Serialized, one-write-per-line appends in emission order
- Flush, fsync and close with idempotent teardown
- Reporting sink failures on the diagnostic logger instead of raising

A session moves UNINITIALIZED -> OPEN -> CLOSED. A sink that cannot be
opened leaves the session FAILED until it is closed. Closed sessions are
never reopened.
"""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

from ..core.config import LOGGER, Valves
from ..core.errors import (
    LogDirectoryError,
    SessionClosedError,
    SinkCloseError,
    SinkError,
    SinkOpenError,
    SinkWriteError,
)
from ..core.formatting import LogEntry, session_filename
from ..core.levels import LogLevel


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    OPEN = "open"
    FAILED = "failed"
    CLOSED = "closed"


class SessionLogger:
    """Writes leveled, timestamped lines to ``<LOG_DIR>/<timestamp>.log``.

    The file is created on the first :meth:`emit` (or an explicit
    :meth:`open`). Sink failures during ``emit`` are reported on ``logger``
    and the entry is dropped; ``close`` reports and re-raises.
    """

    def __init__(
        self,
        valves: Optional[Valves] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the session without touching the filesystem.

        Args:
            valves: Session settings (defaults to ``Valves()``)
            clock: Returns the current local time; used for the file name and line stamps
            logger: Diagnostic logger receiving failure reports
        """
        self.valves = valves if valves is not None else Valves()
        self.logger = logger if logger is not None else LOGGER
        self._clock: Callable[[], datetime] = clock or datetime.now

        self._lock = threading.Lock()
        self._state = SessionState.UNINITIALIZED
        self._handle: TextIO | None = None
        self._path: Path | None = None
        self._started_at: datetime | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def path(self) -> Path | None:
        """Session file path, or ``None`` before the session was opened."""
        return self._path

    @property
    def started_at(self) -> datetime | None:
        return self._started_at

    @property
    def closed(self) -> bool:
        return self._state is SessionState.CLOSED

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def open(self) -> None:
        """Create the log directory and open the session file for appending.

        Raises:
            LogDirectoryError: the directory could not be created
            SinkOpenError: the file could not be opened, or an earlier open failed
            SessionClosedError: the session was already closed
        """
        with self._lock:
            self._open_locked()

    def _open_locked(self) -> None:
        if self._state is SessionState.OPEN:
            return
        if self._state is SessionState.CLOSED:
            raise SessionClosedError("Log session is closed")
        if self._state is SessionState.FAILED:
            raise SinkOpenError(self._path, "Log sink failed to initialize")

        started_at = self._clock()
        log_dir = Path(self.valves.LOG_DIR)
        path = log_dir / session_filename(started_at)
        self._started_at = started_at
        self._path = path

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as exc:
            self._state = SessionState.FAILED
            raise LogDirectoryError(log_dir) from exc
        try:
            handle = open(path, "a", encoding=self.valves.ENCODING)
        except (OSError, ValueError, LookupError) as exc:
            self._state = SessionState.FAILED
            raise SinkOpenError(path) from exc

        self._handle = handle
        self._state = SessionState.OPEN
        self.logger.debug("Log session opened: %s", path)

    def close(self) -> None:
        """Flush buffered lines, fsync, and release the file handle.

        Calling it again is a no-op. Sessions that never opened are simply
        marked closed.

        Raises:
            SinkCloseError: flushing, syncing or closing failed. The session
                is closed regardless.
        """
        with self._lock:
            if self._state is SessionState.CLOSED:
                return
            handle = self._handle
            self._handle = None
            self._state = SessionState.CLOSED
            if handle is None:
                return
            try:
                try:
                    handle.flush()
                    if self.valves.FSYNC_ON_CLOSE:
                        os.fsync(handle.fileno())
                finally:
                    handle.close()
            except (OSError, ValueError) as exc:
                self.logger.error("Failed to flush and close log session %s: %s", self._path, exc, exc_info=exc)
                raise SinkCloseError(self._path) from exc
            self.logger.debug("Log session closed: %s", self._path)

    async def aclose(self) -> None:
        """Close the session without blocking the event loop.

        Resolves once the data is flushed and the handle released. There is
        no timeout: a sink that never finishes closing keeps the caller waiting.
        """
        await asyncio.to_thread(self.close)

    def __enter__(self) -> "SessionLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "SessionLogger":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Writing
    # =========================================================================

    def emit(self, level: LogLevel | str, message: str) -> bool:
        """Append one ``[HH:MM:SS] LEVEL: message`` line to the session file.

        Opens the session on first use. Sink problems are reported on the
        diagnostic logger and the entry is dropped.

        Returns:
            True if the line was handed to the sink, False if it was dropped

        Raises:
            ValueError: ``level`` is not a known severity
        """
        severity = LogLevel.coerce(level)
        with self._lock:
            if self._state is SessionState.CLOSED:
                self.logger.error("Log session is closed; dropping %s entry", severity.value)
                return False
            if self._state is SessionState.FAILED:
                self.logger.error("Log session is not initialized; dropping %s entry", severity.value)
                return False
            try:
                self._open_locked()
            except SinkError as exc:
                self.logger.error("Failed to initialize log session: %s", exc, exc_info=exc)
                return False

            line = LogEntry(self._clock(), severity, str(message)).render()
            handle = self._handle
            assert handle is not None
            try:
                handle.write(line)
                if self.valves.FLUSH_ON_WRITE:
                    handle.flush()
            except (OSError, ValueError) as exc:
                error = SinkWriteError(self._path)
                error.__cause__ = exc
                self.logger.error("%s: %s", error, exc, exc_info=error)
                return False
        return True

    def info(self, message: str) -> bool:
        """Log general information about application flow and state."""
        return self.emit(LogLevel.INFO, message)

    def warning(self, message: str) -> bool:
        """Log a potentially harmful situation that does not stop the application."""
        return self.emit(LogLevel.WARNING, message)

    def error(self, message: str) -> bool:
        """Log an error the application may still recover from."""
        return self.emit(LogLevel.ERROR, message)

    def critical(self, message: str) -> bool:
        """Log a severe failure that likely needs immediate attention."""
        return self.emit(LogLevel.CRITICAL, message)
