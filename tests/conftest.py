"""Shared pytest fixtures and test helpers for playbill tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from playbill.domain.models import Invoice, Performance, Play


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host PLAYBILL_* variables out of settings resolution."""
    monkeypatch.delenv("PLAYBILL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pb = logging.getLogger("playbill")
    pb_level = pb.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pb.setLevel(pb_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> dict[str, Play]:
    """The three-play catalog used throughout the examples."""
    return {
        "hamlet": Play(name="Hamlet", type="tragedy"),
        "as-like": Play(name="As You Like It", type="comedy"),
        "othello": Play(name="Othello", type="tragedy"),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


BIGCO_STATEMENT = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)

PLAYS_JSON: dict[str, Any] = {
    "hamlet": {"name": "Hamlet", "type": "tragedy"},
    "as-like": {"name": "As You Like It", "type": "comedy"},
    "othello": {"name": "Othello", "type": "tragedy"},
}

INVOICES_JSON: list[dict[str, Any]] = [
    {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
    }
]


def write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def plays_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "plays.json", PLAYS_JSON)


@pytest.fixture
def invoices_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "invoices.json", INVOICES_JSON)
