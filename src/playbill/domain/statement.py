"""Computed statement data shared by the text renderer and JSON output."""

from __future__ import annotations

from pydantic import BaseModel

from playbill.domain.models import Catalog, Invoice, resolve_play
from playbill.domain.pricing import (
    DEFAULT_RULES,
    PricingRules,
    amount_for,
    volume_credits_for,
)


class LineItem(BaseModel):
    """One statement line: a priced performance."""

    model_config = {"frozen": True}

    play_id: str
    name: str
    audience: int
    amount: int
    volume_credits: int


class StatementData(BaseModel):
    """Everything a statement shows, with amounts in minor units."""

    model_config = {"frozen": True}

    customer: str
    lines: tuple[LineItem, ...] = ()
    total_amount: int = 0
    total_volume_credits: int = 0


def build_statement_data(
    invoice: Invoice,
    catalog: Catalog,
    rules: PricingRules = DEFAULT_RULES,
) -> StatementData:
    """Price every performance of *invoice* in order and aggregate totals.

    Raises:
        UnknownPlayError: If a performance references a missing play.
        UnknownPlayTypeError: If a referenced play has an unsupported genre.
    """
    lines: list[LineItem] = []
    for perf in invoice.performances:
        play = resolve_play(catalog, perf)
        lines.append(
            LineItem(
                play_id=perf.play_id,
                name=play.name,
                audience=perf.audience,
                amount=amount_for(perf, play, rules),
                volume_credits=volume_credits_for(perf, play, rules),
            )
        )
    return StatementData(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=sum(line.amount for line in lines),
        total_volume_credits=sum(line.volume_credits for line in lines),
    )
