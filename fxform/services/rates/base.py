from __future__ import annotations

"""Rate lookup protocol.

The view model depends on this shape rather than on RateTable directly so a
different table (or a test double) can be injected.
"""
from decimal import Decimal
from typing import List, Protocol


class SupportsConversion(Protocol):
    def currencies(self) -> List[str]: ...

    def supports(self, code: str) -> bool: ...

    def convert(self, amount: Decimal, from_code: str, to_code: str) -> Decimal: ...
