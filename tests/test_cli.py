"""Tests for the root playbill CLI."""

from click.testing import CliRunner

from playbill import __version__
from playbill.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "playbill" in result.output
    assert "statement" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flags in (["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/none.toml"]):
        result = cli_runner.invoke(cli, [*flags, "--version"])
        assert result.exit_code == 0, flags
