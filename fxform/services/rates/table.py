from __future__ import annotations

"""Immutable exchange-rate table.

Every rate is stored as "pivot units per one unit of the currency", so N
currencies need N rates and any pair converts through the pivot:

    amount * rate(from) / rate(to)

Arithmetic stays in Decimal; results are not rounded here (callers round for
display with ``money.round2``).
"""
import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Union

from fxform.core.errors import UnsupportedCurrencyError
from fxform.models.constants import DEFAULT_RATES, PIVOT_CURRENCY
from fxform.models.rates import RateRecord

logger = logging.getLogger("fxform.rates")

RateSource = Union[Mapping[str, Union[Decimal, str, int]], Iterable[RateRecord]]


class RateTable:
    """Fixed currency → pivot-rate mapping with the conversion rule."""

    def __init__(self, rates: RateSource, pivot: Optional[str] = None):
        if isinstance(rates, Mapping):
            records = [RateRecord(code=c, rate=r) for c, r in rates.items()]
        else:
            records = list(rates)
        if not records:
            raise ValueError("rate table needs at least one currency")

        table = {}
        for rec in records:
            if rec.code in table:
                raise ValueError(f"duplicate currency '{rec.code}'")
            table[rec.code] = rec.rate

        pivot = (pivot or records[0].code).upper()
        if pivot not in table:
            raise ValueError(f"pivot currency '{pivot}' missing from table")
        if table[pivot] != 1:
            raise ValueError(f"pivot currency '{pivot}' must map to 1, got {table[pivot]}")

        self._rates = MappingProxyType(table)
        self._pivot = pivot
        logger.debug("rate table built: pivot=%s codes=%s", pivot, sorted(table))

    @property
    def pivot(self) -> str:
        return self._pivot

    @property
    def rates(self) -> Mapping[str, Decimal]:
        """Read-only view of the underlying mapping."""
        return self._rates

    def currencies(self) -> List[str]:
        return sorted(self._rates)

    def supports(self, code: str) -> bool:
        return code in self._rates

    def rate(self, code: str) -> Decimal:
        try:
            return self._rates[code]
        except KeyError:
            raise UnsupportedCurrencyError(code) from None

    def convert(self, amount: Decimal, from_code: str, to_code: str) -> Decimal:
        if not self.supports(from_code) or not self.supports(to_code):
            # Zero, not an exception, for unknown codes.
            logger.warning(
                "convert called with unsupported currency: %s -> %s", from_code, to_code
            )
            return Decimal(0)
        if from_code == to_code:
            return amount

        pivot_amount = amount * self.rate(from_code)
        return pivot_amount / self.rate(to_code)

    def __contains__(self, code: object) -> bool:
        return code in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RateTable(pivot={self._pivot!r}, currencies={self.currencies()!r})"


def build_default_rate_table() -> RateTable:
    return RateTable(DEFAULT_RATES, pivot=PIVOT_CURRENCY)
