"""Tests for the root rulepred CLI."""

from click.testing import CliRunner

from rulepred import __version__
from rulepred.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "rulepred" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_commands_registered(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in ("filter", "namespaces", "namespace"):
        assert name in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in ("--json", "-q", "-v", "--log-json"):
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0, flag
