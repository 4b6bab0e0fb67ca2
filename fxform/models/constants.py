"""Compiled-in domain constants.

Rates are expressed in the pivot currency (BRL): how many BRL one unit of
the currency is worth.
"""

from decimal import Decimal
from typing import Dict

PIVOT_CURRENCY = "BRL"

DEFAULT_RATES: Dict[str, Decimal] = {
    "BRL": Decimal("1.00"),  # pivot
    "USD": Decimal("5.60"),
    "EUR": Decimal("6.10"),
}

DEFAULT_FROM = "USD"
DEFAULT_TO = "BRL"

PLACEHOLDER = "—"
INVALID_AMOUNT_MESSAGE = "Valor inválido."
UNSUPPORTED_CURRENCY_MESSAGE = "Moeda não suportada."
