"""Fixed-point prices and a price provider built on a data source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["FixedU128", "DefaultPriceProvider"]

_U128_MAX = (1 << 128) - 1


@dataclass(frozen=True, order=True)
class FixedU128:
    """An unsigned fixed-point number with 18 decimal places in 128 bits."""

    inner: int

    DIV = 10**18
    MAX_INNER = _U128_MAX

    def __post_init__(self) -> None:
        if not 0 <= self.inner <= _U128_MAX:
            raise ValueError("inner value out of range for FixedU128")

    @classmethod
    def from_inner(cls, inner: int) -> "FixedU128":
        """Build from the raw scaled integer."""
        return cls(inner)

    @classmethod
    def saturating_from_rational(cls, numerator: int, denominator: int) -> "FixedU128":
        """Build ``numerator / denominator``, saturating at the maximum."""
        if denominator == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        if numerator < 0 or denominator < 0:
            raise ValueError("FixedU128 cannot hold negative values")
        return cls(min(numerator * cls.DIV // denominator, _U128_MAX))

    def checked_div(self, other: "FixedU128") -> Optional["FixedU128"]:
        """Divide, or return None on division by zero or overflow."""
        if other.inner == 0:
            return None
        result = self.inner * self.DIV // other.inner
        if result > _U128_MAX:
            return None
        return FixedU128(result)


class DefaultPriceProvider:
    """Relative price of two currencies from a data source of prices."""

    def __init__(self, source: Any) -> None:
        self.source = source

    def get_price(self, base: Any, quote: Any) -> Optional[Any]:
        """Return base price divided by quote price, or None if unavailable."""
        base_price = self.source.get(base)
        if base_price is None:
            return None
        quote_price = self.source.get(quote)
        if quote_price is None:
            return None
        return base_price.checked_div(quote_price)