"""Shared fixtures for logkeeper tests."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from logkeeper import Valves, keeper


class SteppingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2024, 3, 5, 7, 8, 9))


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def valves(log_dir: Path) -> Valves:
    return Valves(LOG_DIR=str(log_dir))


@pytest.fixture
def unwritable_valves(tmp_path: Path) -> Valves:
    """Valves whose LOG_DIR sits below a regular file, so mkdir fails."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return Valves(LOG_DIR=str(blocker / "logs"))


@pytest.fixture
def diagnostics(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="logkeeper")
    return caplog


@pytest.fixture
def fresh_default_keeper(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run against a new process-wide keeper rooted in a temp cwd."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(keeper, "_default_keeper", None)
    yield
    default = keeper._default_keeper
    if default is not None and default.session is not None and not default.session.closed:
        default.close()


@pytest.fixture
def error_records(diagnostics: pytest.LogCaptureFixture):
    """Return a callable listing ERROR records emitted on the diagnostic channel."""

    def _records() -> list[logging.LogRecord]:
        return [r for r in diagnostics.records if r.name == "logkeeper" and r.levelno >= logging.ERROR]

    return _records
