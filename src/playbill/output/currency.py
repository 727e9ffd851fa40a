"""Currency formatting for rendered statements.

The pricing core works in integer minor units; only this module turns
them into display strings.
"""

from __future__ import annotations

from typing import Protocol


class CurrencyFormatter(Protocol):
    def format(self, minor_units: int) -> str:
        """Render an amount given in minor units (e.g. cents)."""
        ...


class MoneyFormatter:
    """Symbol-prefixed, digit-grouped money formatting.

    Defaults produce US-dollar style output::

        >>> MoneyFormatter().format(123456)
        '$1,234.56'
    """

    def __init__(
        self,
        *,
        symbol: str = "$",
        minor_unit_factor: int = 100,
        decimal_places: int = 2,
        thousands_separator: str = ",",
        decimal_separator: str = ".",
    ) -> None:
        if minor_unit_factor <= 0:
            msg = f"minor_unit_factor must be positive, got {minor_unit_factor}"
            raise ValueError(msg)
        self.symbol = symbol
        self.minor_unit_factor = minor_unit_factor
        self.decimal_places = decimal_places
        self.thousands_separator = thousands_separator
        self.decimal_separator = decimal_separator

    def format(self, minor_units: int) -> str:
        # Integer arithmetic throughout; amounts have no size limit.
        scale = 10**self.decimal_places
        units, remainder = divmod(abs(minor_units) * scale, self.minor_unit_factor)
        if remainder * 2 >= self.minor_unit_factor:
            units += 1  # round half up
        sign = "-" if minor_units < 0 and units else ""
        whole, frac = divmod(units, scale)
        text = f"{whole:,}".replace(",", self.thousands_separator)
        if self.decimal_places:
            text = f"{text}{self.decimal_separator}{frac:0{self.decimal_places}d}"
        return f"{sign}{self.symbol}{text}"


USD = MoneyFormatter()
