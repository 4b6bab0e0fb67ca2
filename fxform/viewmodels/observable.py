"""Observable form state.

Stores the four form fields and notifies subscribers synchronously, in
registration order, after every real change. Setting a field to a value equal
to the current one is a no-op: nothing is stored and nobody is notified. That
rule is what stops a handler which writes back into the state from recursing
forever.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger("fxform.state")

AMOUNT_TEXT = "amount_text"
FROM_CODE = "from_code"
TO_CODE = "to_code"
RESULT_TEXT = "result_text"

FIELDS: Tuple[str, ...] = (AMOUNT_TEXT, FROM_CODE, TO_CODE, RESULT_TEXT)

ChangeHandler = Callable[[str], None]
Unsubscribe = Callable[[], None]


class ObservableState:
    def __init__(
        self,
        amount_text: Optional[str] = None,
        from_code: str = "",
        to_code: str = "",
        result_text: str = "",
    ):
        self._values: Dict[str, Any] = {
            AMOUNT_TEXT: amount_text,
            FROM_CODE: from_code,
            TO_CODE: to_code,
            RESULT_TEXT: result_text,
        }
        # (field filter, handler); None filter means every field
        self._handlers: List[Tuple[Optional[str], ChangeHandler]] = []

    @staticmethod
    def _check_field(field: str) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown field '{field}'. Allowed: {FIELDS}")

    def get(self, field: str) -> Any:
        self._check_field(field)
        return self._values[field]

    def set(self, field: str, value: Any) -> bool:
        """Store ``value`` and notify; returns False for a no-op set."""
        self._check_field(field)
        if self._values[field] == value:
            return False
        self._values[field] = value
        logger.debug("field changed: %s", field)
        self._notify(field)
        return True

    def subscribe(
        self, handler: ChangeHandler, field: Optional[str] = None
    ) -> Unsubscribe:
        """Register ``handler``; pass ``field`` to only hear about that field.

        Returns a callable that removes the registration.
        """
        if field is not None:
            self._check_field(field)
        entry = (field, handler)
        self._handlers.append(entry)

        def unsubscribe() -> None:
            if entry in self._handlers:
                self._handlers.remove(entry)

        return unsubscribe

    def _notify(self, field: str) -> None:
        # Snapshot so handlers may (un)subscribe while being dispatched
        for wanted, handler in tuple(self._handlers):
            if wanted is None or wanted == field:
                handler(field)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)
