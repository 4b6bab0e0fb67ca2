"""Main conversion form view model.

Owns the observable form state, the rate table and the three commands. The
rendering layer binds to the four fields, fills its currency pickers from
``currencies`` and invokes ``commands.convert/swap/clear``.

Only amount edits re-publish Convert's availability; the currency pair is
checked when Convert runs, so a parsable amount enables the button even when
the selected pair turns out to be unsupported.
"""

from __future__ import annotations

import enum
import logging
from decimal import Decimal
from typing import List, Optional

from fxform.core.config import Settings, get_settings
from fxform.core.errors import (
    ConversionError,
    ParseError,
    UnsupportedCurrencyError,
    error_message,
)
from fxform.services.amount_parser import AmountParser
from fxform.services.money import format_amount
from fxform.services.rates.base import SupportsConversion
from fxform.services.rates.table import build_default_rate_table
from fxform.viewmodels.commands import Command, CommandSet
from fxform.viewmodels.observable import (
    AMOUNT_TEXT,
    FROM_CODE,
    RESULT_TEXT,
    TO_CODE,
    ChangeHandler,
    ObservableState,
    Unsubscribe,
)

logger = logging.getLogger("fxform.viewmodel")


class FormState(str, enum.Enum):
    IDLE = "idle"
    READY = "ready"


def derive_form_state(amount_text: Optional[str], parser: AmountParser) -> FormState:
    if parser.try_parse(amount_text).success:
        return FormState.READY
    return FormState.IDLE


class MainViewModel:
    def __init__(
        self,
        rates: Optional[SupportsConversion] = None,
        settings: Optional[Settings] = None,
        parser: Optional[AmountParser] = None,
    ):
        self._settings = settings or get_settings()
        self._rates = rates if rates is not None else build_default_rate_table()
        self._parser = parser or AmountParser(self._settings.number_format)

        self.currencies: List[str] = list(self._rates.currencies())

        self.state = ObservableState(
            amount_text=None,
            from_code=self._settings.default_from,
            to_code=self._settings.default_to,
            result_text=self._settings.placeholder,
        )
        self.commands = CommandSet(
            convert=Command("convert", self._do_convert, self._can_convert),
            swap=Command("swap", self._do_swap),
            clear=Command("clear", self._do_clear),
        )
        self.state.subscribe(self._on_amount_changed, field=AMOUNT_TEXT)

    # Fields --------------------------------------------------
    @property
    def amount_text(self) -> Optional[str]:
        return self.state.get(AMOUNT_TEXT)

    @amount_text.setter
    def amount_text(self, value: Optional[str]) -> None:
        self.state.set(AMOUNT_TEXT, value)

    @property
    def from_code(self) -> str:
        return self.state.get(FROM_CODE)

    @from_code.setter
    def from_code(self, value: str) -> None:
        self.state.set(FROM_CODE, value)

    @property
    def to_code(self) -> str:
        return self.state.get(TO_CODE)

    @to_code.setter
    def to_code(self, value: str) -> None:
        self.state.set(TO_CODE, value)

    @property
    def result_text(self) -> str:
        return self.state.get(RESULT_TEXT)

    @result_text.setter
    def result_text(self, value: str) -> None:
        self.state.set(RESULT_TEXT, value)

    def subscribe(self, handler: ChangeHandler) -> Unsubscribe:
        return self.state.subscribe(handler)

    @property
    def form_state(self) -> FormState:
        return derive_form_state(self.amount_text, self._parser)

    # Guard ---------------------------------------------------
    def _can_convert(self) -> bool:
        return self.form_state is FormState.READY

    def _on_amount_changed(self, field: str) -> None:
        self.commands.convert.raise_can_execute_changed()

    # Actions -------------------------------------------------
    def _compute(self) -> str:
        parsed = self._parser.try_parse(self.amount_text)
        if not parsed.success:
            raise ParseError(self.amount_text)
        from_code, to_code = self.from_code, self.to_code
        unsupported = [c for c in (from_code, to_code) if not self._rates.supports(c)]
        if unsupported:
            raise UnsupportedCurrencyError(*unsupported)

        amount: Decimal = parsed.amount
        result = self._rates.convert(amount, from_code, to_code)
        fmt = self._settings.number_format
        return (
            f"{format_amount(amount, fmt)} {from_code} = "
            f"{format_amount(result, fmt)} {to_code}"
        )

    def _do_convert(self) -> None:
        try:
            text = self._compute()
        except ConversionError as exc:
            logger.info("conversion rejected: %s (%s)", exc, exc.code)
            self.result_text = error_message(exc, self._settings)
            return
        logger.debug("conversion result: %s", text)
        self.result_text = text

    def _do_swap(self) -> None:
        from_code, to_code = self.from_code, self.to_code
        self.from_code = to_code
        self.to_code = from_code
        self.result_text = self._settings.placeholder

    def _do_clear(self) -> None:
        self.amount_text = ""
        self.result_text = self._settings.placeholder
