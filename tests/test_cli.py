"""Tests for the root melclock CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from melclock import __version__
from melclock.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "melclock" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-melclock.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["calc", "watch", "categories"])
def test_commands_registered(command: str) -> None:
    assert command in cli.commands


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("command", ["calc", "watch"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"melclock {command}" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_reports_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    bad = tmp_path / "melclock.toml"
    bad.write_text("[clock\n")
    result = cli_runner.invoke(cli, ["categories"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
