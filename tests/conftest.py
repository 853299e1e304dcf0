"""Shared pytest fixtures for timeman tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from timeman.config.settings import TimemanSettings
from timeman.services.base import Clock

# Tuesday 2024-04-23, the day after the reference dates used in tests.
FROZEN_NOW = datetime(2024, 4, 23, 18, 20, 29, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no TIMEMAN_* env vars.

    Keeps a developer's own timeman.toml or environment out of the tests.
    """
    for name in ("TIMEMAN_CONFIG", "TIMEMAN_FORMAT", "TIMEMAN_UTC_OFFSET"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tm = logging.getLogger("timeman")
    tm_level = tm.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tm.setLevel(tm_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def frozen_clock() -> Clock:
    """Clock that always returns FROZEN_NOW."""
    return lambda: FROZEN_NOW


@pytest.fixture
def settings(tmp_path: Path) -> TimemanSettings:
    """Default settings with no config file."""
    return TimemanSettings.from_cli(start=tmp_path)
