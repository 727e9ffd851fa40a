"""StringIO-backed Rich console used by the renderers.

Renderers print into the buffer and hand back a string; the CLI decides
where it goes. Rich drops color codes when the buffer is not a terminal,
which keeps statement text byte-exact in pipes and tests.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PLAYBILL_THEME = Theme(
    {
        "pb.ok": "bold green",
        "pb.error": "bold red",
        "pb.op": "bold cyan",
        "pb.key": "dim",
        "pb.code": "bold magenta",
    }
)


def create_console(*, width: int = 120) -> Console:
    return Console(file=StringIO(), theme=PLAYBILL_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    """Everything printed to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
