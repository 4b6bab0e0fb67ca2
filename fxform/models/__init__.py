"""Domain models and constants for the conversion form."""

from .constants import (
    DEFAULT_RATES,
    PIVOT_CURRENCY,
    PLACEHOLDER,
)  # re-export
from .rates import RateRecord

__all__ = [
    "DEFAULT_RATES",
    "PIVOT_CURRENCY",
    "PLACEHOLDER",
    "RateRecord",
]
