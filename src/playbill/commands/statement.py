"""Command: render billing statements for invoices."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playbill.commands._base import PlaybillCommand

if TYPE_CHECKING:
    from playbill.commands._context import AppContext


@click.command(
    cls=PlaybillCommand,
    examples="""\
  playbill statement invoices.json --plays plays.json
  playbill --json statement invoices.json --plays plays.json
  playbill -v statement invoices.json --plays plays.json
  playbill -c tariffs/2024.toml statement invoices.json --plays plays.json""",
)
@click.argument(
    "invoices_path",
    metavar="INVOICES",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--plays",
    "plays_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON catalog of plays keyed by play ID.",
)
@click.pass_obj
def statement(app: AppContext, invoices_path: Path, plays_path: Path) -> None:
    """Print the billing statement for each invoice in INVOICES."""
    from playbill.services.statement import StatementService

    svc = StatementService.from_settings(app.settings)
    app.emit(svc.statement_from_files(invoices_path, plays_path))
