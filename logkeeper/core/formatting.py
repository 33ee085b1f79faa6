"""Log entry value type and timestamp rendering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .levels import LogLevel

FILENAME_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
LINE_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_FILE_SUFFIX = ".log"


def format_filename_timestamp(moment: datetime) -> str:
    """Render *moment* as ``yyyy-MM-dd_HH-mm-ss``."""
    return moment.strftime(FILENAME_TIMESTAMP_FORMAT)


def format_line_timestamp(moment: datetime) -> str:
    """Render *moment* as zero-padded 24-hour ``HH:MM:SS``."""
    return moment.strftime(LINE_TIMESTAMP_FORMAT)


def session_filename(started_at: datetime) -> str:
    return f"{format_filename_timestamp(started_at)}{LOG_FILE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One message at one severity, stamped with the time it was emitted."""

    timestamp: datetime
    level: LogLevel
    message: str

    def render(self) -> str:
        """Return the line written to the sink, newline included."""
        return f"[{format_line_timestamp(self.timestamp)}] {self.level.value}: {self.message}\n"
