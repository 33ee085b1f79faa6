"""Severity levels understood by the session logger."""

from __future__ import annotations

from enum import Enum


class LogLevel(str, Enum):
    """Closed set of severities, listed from least to most severe.

    The order is informational only; nothing filters on it.
    """

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def coerce(cls, value: "LogLevel | str") -> "LogLevel":
        """Return the level for *value*, accepting names in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown log level: {value!r}")

    def __str__(self) -> str:
        return self.value
