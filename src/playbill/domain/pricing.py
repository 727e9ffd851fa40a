"""Pricing engine — amounts owed and volume credits per performance.

All figures are integers in minor currency units (cents). Conversion to
display units happens only when a statement is rendered.

Rules per genre:

* tragedy — base amount, plus a per-seat surcharge above the threshold.
* comedy — base amount, plus a flat bonus and a per-seat surcharge above
  the threshold, plus a per-seat amount for the whole audience.

Credits are ``max(audience - credit_threshold, 0)``; comedies add one
extra credit per ``comedy_credit_divisor`` attendees.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, Field

from playbill.domain.models import Catalog, Invoice, Performance, Play, resolve_play
from playbill.domain.types import Genre


class PricingRules(BaseModel):
    """Pricing and credit constants ([pricing] section)."""

    model_config = {"frozen": True, "extra": "forbid"}

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_threshold_per_person: int = 1000

    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_threshold_amount: int = 10000
    comedy_over_threshold_per_person: int = 500
    comedy_amount_per_audience: int = 300

    credit_threshold: int = 30
    comedy_credit_divisor: int = Field(default=5, gt=0)


DEFAULT_RULES = PricingRules()


def _tragedy_amount(audience: int, rules: PricingRules) -> int:
    result = rules.tragedy_base_amount
    if audience > rules.tragedy_audience_threshold:
        result += rules.tragedy_over_threshold_per_person * (
            audience - rules.tragedy_audience_threshold
        )
    return result


def _comedy_amount(audience: int, rules: PricingRules) -> int:
    result = rules.comedy_base_amount
    if audience > rules.comedy_audience_threshold:
        result += rules.comedy_over_threshold_amount + rules.comedy_over_threshold_per_person * (
            audience - rules.comedy_audience_threshold
        )
    result += rules.comedy_amount_per_audience * audience
    return result


def _no_bonus_credits(audience: int, rules: PricingRules) -> int:
    return 0


def _comedy_bonus_credits(audience: int, rules: PricingRules) -> int:
    return audience // rules.comedy_credit_divisor


_AMOUNT_RULES: dict[Genre, Callable[[int, PricingRules], int]] = {
    Genre.TRAGEDY: _tragedy_amount,
    Genre.COMEDY: _comedy_amount,
}

_BONUS_CREDIT_RULES: dict[Genre, Callable[[int, PricingRules], int]] = {
    Genre.TRAGEDY: _no_bonus_credits,
    Genre.COMEDY: _comedy_bonus_credits,
}


def amount_for(
    performance: Performance,
    play: Play,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Amount owed for one performance, in minor units.

    Raises:
        UnknownPlayTypeError: If the play's genre is not supported.
    """
    return _AMOUNT_RULES[play.genre](performance.audience, rules)


def volume_credits_for(
    performance: Performance,
    play: Play,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Volume credits earned by one performance.

    Raises:
        UnknownPlayTypeError: If the play's genre is not supported.
    """
    base = max(performance.audience - rules.credit_threshold, 0)
    return base + _BONUS_CREDIT_RULES[play.genre](performance.audience, rules)


def total_amount(
    invoice: Invoice,
    catalog: Catalog,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Sum of :func:`amount_for` over the invoice's performances."""
    result = 0
    for perf in invoice.performances:
        result += amount_for(perf, resolve_play(catalog, perf), rules)
    return result


def total_volume_credits(
    invoice: Invoice,
    catalog: Catalog,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Sum of :func:`volume_credits_for` over the invoice's performances."""
    result = 0
    for perf in invoice.performances:
        result += volume_credits_for(perf, resolve_play(catalog, perf), rules)
    return result
