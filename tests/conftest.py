"""Shared pytest fixtures for chronofmt tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, date, datetime, time, timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from chronofmt.config.settings import reset_settings
from chronofmt.dialects.registry import reset_registry

PLUS_TWO = timezone(timedelta(hours=2))


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without user config, env overrides or leftover state."""
    for name in ("CHRONOFMT_CONFIG", "CHRONOFMT_LOCALE", "CHRONOFMT_LOCALE__DEFAULT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CHRONOFMT_PLUGINS__ENABLED", "false")
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    reset_settings()
    reset_registry()
    yield
    reset_settings()
    reset_registry()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def moment() -> datetime:
    """Naive Tuesday afternoon."""
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def aware_moment() -> datetime:
    return datetime(2024, 3, 5, 14, 7, 9, tzinfo=PLUS_TWO)


@pytest.fixture
def day() -> date:
    return date(2024, 3, 5)


@pytest.fixture
def clock_time() -> time:
    return time(9, 5, 3)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 12, 0, tzinfo=UTC)
