"""Read plays and invoices from JSON documents.

Plays are a JSON object keyed by play ID::

    {"hamlet": {"name": "Hamlet", "type": "tragedy"}}

Invoices are a single invoice object or a JSON array of them::

    [{"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}]

Malformed JSON and schema violations raise pydantic's ``ValidationError``;
reading can also raise ``UnicodeDecodeError`` or ``FileNotFoundError``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from playbill.domain.models import Invoice, Play

_CATALOG_ADAPTER: TypeAdapter[dict[str, Play]] = TypeAdapter(dict[str, Play])
_INVOICES_ADAPTER: TypeAdapter[Invoice | list[Invoice]] = TypeAdapter(Invoice | list[Invoice])


def load_catalog(path: Path) -> dict[str, Play]:
    """Load the play catalog from *path*."""
    raw = path.read_text(encoding="utf-8")
    return _CATALOG_ADAPTER.validate_json(raw)


def load_invoices(path: Path) -> list[Invoice]:
    """Load one or more invoices from *path*, preserving document order."""
    raw = path.read_text(encoding="utf-8")
    parsed = _INVOICES_ADAPTER.validate_json(raw)
    if isinstance(parsed, Invoice):
        return [parsed]
    return parsed
