"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, playbill.toml only contains
overrides. An empty (or absent) playbill.toml reproduces the standard
US-dollar tariff.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from playbill.output.currency import MoneyFormatter


class CurrencyConfig(BaseModel):
    """[currency] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    symbol: str = "$"
    minor_unit_factor: int = Field(default=100, gt=0)
    decimal_places: int = Field(default=2, ge=0)
    thousands_separator: str = ","
    decimal_separator: str = "."

    def formatter(self) -> MoneyFormatter:
        """Build the display formatter for this currency."""
        return MoneyFormatter(
            symbol=self.symbol,
            minor_unit_factor=self.minor_unit_factor,
            decimal_places=self.decimal_places,
            thousands_separator=self.thousands_separator,
            decimal_separator=self.decimal_separator,
        )

