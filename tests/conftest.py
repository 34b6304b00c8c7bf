"""Shared pytest fixtures for melclock tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from melclock.config.settings import MelSettings
from melclock.services.deadline import DeadlineService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host MELCLOCK_* variables from leaking into settings."""
    monkeypatch.delenv("MELCLOCK_CONFIG", raising=False)
    monkeypatch.delenv("MELCLOCK_JSON_OUTPUT", raising=False)
    monkeypatch.delenv("MELCLOCK_QUIET", raising=False)
    monkeypatch.delenv("MELCLOCK_VERBOSE", raising=False)
    monkeypatch.delenv("MELCLOCK_CLOCK__REFRESH_SECONDS", raising=False)
    monkeypatch.delenv("MELCLOCK_DEADLINES__CATEGORY_A_DAYS", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> MelSettings:
    """Default settings with no config file in reach."""
    return MelSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def service(settings: MelSettings) -> DeadlineService:
    return DeadlineService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI commands from an empty temp dir so no melclock.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
