"""Logging subsystem.

This package provides session log management:
- SessionLogger: one append-only log file per session with flush/close discipline
"""

from __future__ import annotations

from .session_logger import SessionLogger, SessionState

__all__ = [
    "SessionLogger",
    "SessionState",
]
