"""Plain-text statement rendering.

:func:`render_statement` is the library entry point: invoice and catalog
in, statement text out. It never prints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from playbill.domain.pricing import DEFAULT_RULES, PricingRules
from playbill.domain.statement import StatementData, build_statement_data
from playbill.output.currency import USD, CurrencyFormatter

if TYPE_CHECKING:
    from playbill.domain.models import Catalog, Invoice


def render_text(data: StatementData, formatter: CurrencyFormatter = USD) -> str:
    """Format computed statement data as text, one ``\\n``-terminated line each."""
    lines = [f"Statement for {data.customer}"]
    for item in data.lines:
        lines.append(f"  {item.name}: {formatter.format(item.amount)} ({item.audience} seats)")
    lines.append(f"Amount owed is {formatter.format(data.total_amount)}")
    lines.append(f"You earned {data.total_volume_credits} credits")
    return "".join(f"{line}\n" for line in lines)


def render_statement(
    invoice: Invoice,
    catalog: Catalog,
    *,
    rules: PricingRules = DEFAULT_RULES,
    formatter: CurrencyFormatter = USD,
) -> str:
    """Compute and render the statement for *invoice*.

    Raises:
        UnknownPlayError: If a performance references a missing play.
        UnknownPlayTypeError: If a referenced play has an unsupported genre.
    """
    return render_text(build_statement_data(invoice, catalog, rules), formatter)
