"""Money / rounding helpers.

Centralized so the rate table, parser and view model share identical
rounding and rendering semantics.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from fxform.core.config import NumberFormat

_CENTS = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    value = Decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit, two decimals and a carry
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, number_format: NumberFormat) -> str:
    """Render ``value`` with two decimals and grouped thousands (N2)."""
    plain = f"{round2(value):,.2f}"
    # Python renders "1,234.56"; map onto the configured separators.
    return plain.translate(
        str.maketrans(
            {",": number_format.group_separator, ".": number_format.decimal_separator}
        )
    )
