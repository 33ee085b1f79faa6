"""Configuration and the package diagnostic logger."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

# Diagnostic channel for sink failures. Hosts decide where it goes.
LOGGER = logging.getLogger("logkeeper")

DEFAULT_LOG_DIR = "logs"


class Valves(BaseModel):
    """Settings for a logging session."""

    LOG_DIR: str = Field(
        default=DEFAULT_LOG_DIR,
        description="Directory that receives one <timestamp>.log file per session. Created if missing.",
    )
    ENCODING: str = Field(
        default="utf-8",
        description="Text encoding used for the session log file.",
    )
    FLUSH_ON_WRITE: bool = Field(
        default=False,
        description="Flush the file handle after every entry instead of relying on buffering.",
    )
    FSYNC_ON_CLOSE: bool = Field(
        default=True,
        description="Call fsync before closing so entries are durable once close returns.",
    )

    @field_validator("LOG_DIR")
    @classmethod
    def _require_log_dir(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("LOG_DIR must not be empty")
        return value
