"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from playbill.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from playbill.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pb.ok")
    op = Text(f"  {result.op}", style="pb.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="pb.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pb.error")
    op = Text(f"  {result.op}", style="pb.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="pb.code"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Statement ─────────────────────────────────────────────────────────


def _render_statement(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print each statement verbatim, separated by a blank line."""
    statements: list[dict[str, Any]] = result.data.get("statements", [])
    text = "\n".join(stmt["text"] for stmt in statements)
    console.print(Text(text), end="", soft_wrap=True)

    if verbose:
        for stmt in statements:
            console.print()
            console.print(_line_table(stmt))


def _line_table(stmt: dict[str, Any]) -> Table:
    """Per-line breakdown in minor units (verbose only)."""
    table = Table(title=stmt["customer"], title_justify="left")
    table.add_column("Play")
    table.add_column("Seats", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Credits", justify="right")
    for line in stmt["lines"]:
        table.add_row(
            line["name"],
            str(line["audience"]),
            str(line["amount"]),
            str(line["volume_credits"]),
        )
    table.add_row(
        Text("total", style="bold"),
        "",
        str(stmt["total_amount"]),
        str(stmt["total_volume_credits"]),
    )
    return table


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "statement": _render_statement,
}
