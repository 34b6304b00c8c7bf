"""Tests for MelSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from melclock.config.settings import MelSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = MelSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.clock.refresh_seconds == 60.0
        assert settings.deadlines.category_a_days is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MelSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "melclock.toml").write_text(
            "[clock]\nrefresh_seconds = 15\n[deadlines]\ncategory_a_days = 7\n"
        )
        settings = MelSettings.from_cli(search_from=tmp_path)
        assert settings.clock.refresh_seconds == 15
        assert settings.deadlines.category_a_days == 7
        assert settings.deadlines.max_custom_days == 365
        assert settings.config_path == tmp_path / "melclock.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "mel.toml"
        custom.parent.mkdir()
        custom.write_text("[deadlines]\nmax_custom_days = 30\n")
        settings = MelSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.deadlines.max_custom_days == 30
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "melclock.toml").write_text("[clock\n")
        with pytest.raises(click.ClickException):
            MelSettings.from_cli(search_from=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "melclock.toml").write_text("[clock]\nrefresh_seconds = 15\n")
        monkeypatch.setenv("MELCLOCK_CLOCK__REFRESH_SECONDS", "5")
        settings = MelSettings.from_cli(search_from=tmp_path)
        assert settings.clock.refresh_seconds == 5

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MELCLOCK_QUIET", "false")
        settings = MelSettings.from_cli(search_from=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_unset_flag_falls_through(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MELCLOCK_JSON_OUTPUT", "true")
        settings = MelSettings.from_cli(search_from=tmp_path, json_output=None)
        assert settings.json_output is True
