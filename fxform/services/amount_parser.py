"""Locale-tolerant amount parsing.

Users type amounts either as ``10,50`` (the configured convention) or as
``10.50``. Parsing first applies the configured convention strictly: the group
separator is only accepted between well-formed groups of three digits. When
that fails the alternate separator is substituted for the decimal one and the
same rules are applied again, so ``10.50`` reads as ``10,50``.

Only non-negative amounts are accepted; a sign other than ``+`` fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Pattern

from fxform.core.config import NumberFormat


@dataclass(frozen=True)
class ParseResult:
    success: bool
    amount: Decimal = Decimal(0)


_FAILED = ParseResult(success=False)


class AmountParser:
    def __init__(self, number_format: Optional[NumberFormat] = None):
        self._format = number_format or NumberFormat()
        self._pattern = self._compile(self._format)

    @staticmethod
    def _compile(fmt: NumberFormat) -> Pattern[str]:
        g = re.escape(fmt.group_separator)
        d = re.escape(fmt.decimal_separator)
        return re.compile(
            rf"^\+?(?P<int>[0-9]{{1,3}}(?:{g}[0-9]{{3}})+|[0-9]*)(?:{d}(?P<frac>[0-9]*))?$"
        )

    @property
    def number_format(self) -> NumberFormat:
        return self._format

    def _parse_strict(self, s: str) -> Optional[Decimal]:
        m = self._pattern.match(s)
        if not m:
            return None
        int_part = m.group("int").replace(self._format.group_separator, "")
        frac = m.group("frac") or ""
        if not int_part and not frac:
            return None
        digits = int_part or "0"
        if frac:
            digits = f"{digits}.{frac}"
        try:
            return Decimal(digits)
        except InvalidOperation:  # pragma: no cover - regex admits digits only
            return None

    def try_parse(self, text: Optional[str]) -> ParseResult:
        if text is None:
            return _FAILED
        s = text.strip()
        if not s:
            return _FAILED
        amount = self._parse_strict(s)
        if amount is None:
            s = s.replace(self._format.group_separator, self._format.decimal_separator)
            amount = self._parse_strict(s)
        if amount is None:
            return _FAILED
        return ParseResult(success=True, amount=amount)
