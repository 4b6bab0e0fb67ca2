from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from fxform.core.config import Settings

logger = logging.getLogger("fxform.errors")


class ConversionError(Exception):
    """Base for failures surfaced to the user as result text."""

    code = "conversion_error"


class ParseError(ConversionError):
    code = "invalid_amount"

    def __init__(self, text: str | None):
        super().__init__(f"not a valid amount: {text!r}")
        self.text = text


class UnsupportedCurrencyError(ConversionError):
    code = "unsupported_currency"

    def __init__(self, *codes: str):
        super().__init__(f"unsupported currency: {', '.join(codes)}")
        self.codes = codes


def error_message(exc: ConversionError, settings: "Settings") -> str:
    """Map a conversion failure to the text shown in the result field."""
    if isinstance(exc, ParseError):
        return settings.invalid_amount_message
    if isinstance(exc, UnsupportedCurrencyError):
        return settings.unsupported_currency_message
    logger.error("no message mapped for %s", exc.code)
    return settings.placeholder
