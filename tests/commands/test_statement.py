"""Tests for the ``statement`` command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from playbill.cli import cli
from tests.conftest import BIGCO_STATEMENT, INVOICES_JSON, PLAYS_JSON, write_json


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestStatementCommand:
    def test_prints_statement(
        self, cli_runner: CliRunner, invoices_file: Path, plays_file: Path
    ) -> None:
        result = cli_runner.invoke(
            cli, ["statement", str(invoices_file), "--plays", str(plays_file)]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout == BIGCO_STATEMENT

    def test_multiple_invoices(self, cli_runner: CliRunner, tmp_path: Path, plays_file: Path) -> None:
        second = {"customer": "SmallCo", "performances": [{"playID": "hamlet", "audience": 55}]}
        invoices = write_json(tmp_path / "many.json", [*INVOICES_JSON, second])
        result = cli_runner.invoke(cli, ["statement", str(invoices), "--plays", str(plays_file)])
        assert result.exit_code == 0
        assert result.stdout == (
            BIGCO_STATEMENT
            + "\n"
            + "Statement for SmallCo\n"
            + "  Hamlet: $650.00 (55 seats)\n"
            + "Amount owed is $650.00\n"
            + "You earned 25 credits\n"
        )

    def test_json_output(self, cli_runner: CliRunner, invoices_file: Path, plays_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "statement", str(invoices_file), "--plays", str(plays_file)]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        stmt = data["data"]["statements"][0]
        assert stmt["total_amount"] == 173000
        assert stmt["total_volume_credits"] == 47

    def test_quiet(self, cli_runner: CliRunner, invoices_file: Path, plays_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "statement", str(invoices_file), "--plays", str(plays_file)]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: statement"

    def test_unknown_genre_fails(
        self, cli_runner: CliRunner, invoices_file: Path, tmp_path: Path
    ) -> None:
        plays = write_json(
            tmp_path / "plays.json",
            {**PLAYS_JSON, "hamlet": {"name": "Hamlet", "type": "opera"}},
        )
        result = cli_runner.invoke(cli, ["statement", str(invoices_file), "--plays", str(plays)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "unknown type: opera" in result.stderr

    def test_unknown_play_fails(
        self, cli_runner: CliRunner, tmp_path: Path, plays_file: Path
    ) -> None:
        invoices = write_json(
            tmp_path / "invoices.json",
            {"customer": "A", "performances": [{"playID": "lear", "audience": 3}]},
        )
        result = cli_runner.invoke(cli, ["statement", str(invoices), "--plays", str(plays_file)])
        assert result.exit_code == 1
        assert "unknown play: lear" in result.stderr

    def test_empty_invoice_warns_on_stderr(
        self, cli_runner: CliRunner, tmp_path: Path, plays_file: Path
    ) -> None:
        invoices = write_json(tmp_path / "invoices.json", {"customer": "Nobody", "performances": []})
        result = cli_runner.invoke(cli, ["statement", str(invoices), "--plays", str(plays_file)])
        assert result.exit_code == 0
        assert result.stdout.startswith("Statement for Nobody\n")
        assert "WARNING: Invoice for Nobody has no performances" in result.stderr

    def test_non_utf8_invoices_fail_cleanly(
        self, cli_runner: CliRunner, tmp_path: Path, plays_file: Path
    ) -> None:
        invoices = tmp_path / "invoices.json"
        invoices.write_bytes(b"\xff\xfe")
        result = cli_runner.invoke(cli, ["statement", str(invoices), "--plays", str(plays_file)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "not valid UTF-8" in result.stderr

    def test_config_overrides_currency(
        self, cli_runner: CliRunner, tmp_path: Path, invoices_file: Path, plays_file: Path
    ) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[currency]\nsymbol = "£"\n', encoding="utf-8")
        result = cli_runner.invoke(
            cli,
            ["-c", str(config), "statement", str(invoices_file), "--plays", str(plays_file)],
        )
        assert result.exit_code == 0
        assert "Amount owed is £1,730.00" in result.stdout

    def test_plays_required(self, cli_runner: CliRunner, invoices_file: Path) -> None:
        result = cli_runner.invoke(cli, ["statement", str(invoices_file)])
        assert result.exit_code == 2

    def test_missing_invoices_file(self, cli_runner: CliRunner, plays_file: Path) -> None:
        result = cli_runner.invoke(cli, ["statement", "nope.json", "--plays", str(plays_file)])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["statement", "--examples"])
        assert result.exit_code == 0
        assert "playbill statement invoices.json --plays plays.json" in result.output


def test_config_typo_fails_cleanly(
    cli_runner: CliRunner, tmp_path: Path, invoices_file: Path, plays_file: Path
) -> None:
    config = tmp_path / "typo.toml"
    config.write_text("[pricing]\ntragedy_base_amout = 1\n")
    result = cli_runner.invoke(
        cli, ["-c", str(config), "statement", str(invoices_file), "--plays", str(plays_file)]
    )
    assert result.exit_code == 1
    assert "tragedy_base_amout" in result.output
