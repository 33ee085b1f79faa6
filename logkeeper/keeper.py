"""Process-wide LogKeeper facade.

LogKeeper owns at most one SessionLogger, created on the first log call.
Once closed it stays inert: later calls are reported and dropped and no new
session is started.

Example::

    import logkeeper

    logkeeper.info("Application started")
    logkeeper.error("Connection failed")
    await logkeeper.save_logs()
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from .core.config import LOGGER, Valves
from .core.errors import LogKeeperError
from .core.levels import LogLevel
from .logging.session_logger import SessionLogger


class LogKeeper:
    """Lazily creates a single logging session and tears it down on request."""

    def __init__(
        self,
        valves: Optional[Valves] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._valves = valves if valves is not None else Valves()
        self._clock = clock
        self.logger = logger if logger is not None else LOGGER
        self._lock = threading.Lock()
        self._session: SessionLogger | None = None
        self._closed = False

    @property
    def valves(self) -> Valves:
        return self._valves

    @property
    def session(self) -> SessionLogger | None:
        """The active session, or ``None`` until the first log call."""
        return self._session

    @property
    def closed(self) -> bool:
        return self._closed

    def configure(self, valves: Valves) -> None:
        """Replace the settings used for the session.

        Raises:
            LogKeeperError: a session was already started or the keeper closed
        """
        with self._lock:
            if self._session is not None or self._closed:
                raise LogKeeperError("LogKeeper cannot be reconfigured after logging has started")
            self._valves = valves

    def _ensure_session(self) -> SessionLogger | None:
        with self._lock:
            if self._session is None and not self._closed:
                self._session = SessionLogger(self._valves, clock=self._clock, logger=self.logger)
            return self._session

    def emit(self, level: LogLevel | str, message: str) -> bool:
        """Write one entry to the session file, starting the session if needed."""
        session = self._ensure_session()
        if session is None:
            severity = LogLevel.coerce(level)
            self.logger.error("LogKeeper is closed; dropping %s entry", severity.value)
            return False
        return session.emit(level, message)

    def info(self, message: str) -> bool:
        return self.emit(LogLevel.INFO, message)

    def warning(self, message: str) -> bool:
        return self.emit(LogLevel.WARNING, message)

    def error(self, message: str) -> bool:
        return self.emit(LogLevel.ERROR, message)

    def critical(self, message: str) -> bool:
        return self.emit(LogLevel.CRITICAL, message)

    def _mark_closed(self) -> SessionLogger | None:
        with self._lock:
            self._closed = True
            return self._session

    def close(self) -> None:
        """Flush and close the session file from synchronous code."""
        session = self._mark_closed()
        if session is not None:
            session.close()

    async def save_logs(self) -> None:
        """Flush and close the session file.

        Await this before the process exits; unflushed entries are otherwise
        lost. Safe to call more than once.

        Raises:
            SinkCloseError: the sink could not be flushed or closed
        """
        session = self._mark_closed()
        if session is not None:
            await session.aclose()

    aclose = save_logs


_default_keeper: LogKeeper | None = None
_default_lock = threading.Lock()


def get_keeper() -> LogKeeper:
    """Return the process-wide keeper, creating it on first access."""
    global _default_keeper
    with _default_lock:
        if _default_keeper is None:
            _default_keeper = LogKeeper()
        return _default_keeper


def configure(valves: Valves) -> None:
    get_keeper().configure(valves)


def emit(level: LogLevel | str, message: str) -> bool:
    return get_keeper().emit(level, message)


def info(message: str) -> bool:
    return get_keeper().info(message)


def warning(message: str) -> bool:
    return get_keeper().warning(message)


def error(message: str) -> bool:
    return get_keeper().error(message)


def critical(message: str) -> bool:
    return get_keeper().critical(message)


def close() -> None:
    get_keeper().close()


async def save_logs() -> None:
    await get_keeper().save_logs()
