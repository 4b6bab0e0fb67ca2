from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

from fxform.core.logging import command_context

Action = Callable[[], None]
Guard = Callable[[], bool]
Listener = Callable[["Command"], None]


class Command:
    """Named action with an optional guard.

    The guard is never cached; ``can_execute()`` evaluates it on every call.
    Listeners registered with ``on_can_execute_changed`` are told when the
    owner calls ``raise_can_execute_changed()`` and should re-query the guard.
    ``execute()`` does not consult the guard.
    """

    def __init__(self, name: str, action: Action, guard: Optional[Guard] = None):
        self.name = name
        self._action = action
        self._guard = guard
        self._listeners: List[Listener] = []

    def can_execute(self) -> bool:
        if self._guard is None:
            return True
        return bool(self._guard())

    def execute(self) -> None:
        with command_context(self.name):
            self._action()

    def on_can_execute_changed(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def raise_can_execute_changed(self) -> None:
        for listener in tuple(self._listeners):
            listener(self)

    def __repr__(self) -> str:
        return f"Command({self.name!r})"


@dataclass(frozen=True)
class CommandSet:
    convert: Command
    swap: Command
    clear: Command

    def as_dict(self) -> Dict[str, Command]:
        return {"convert": self.convert, "swap": self.swap, "clear": self.clear}

    def __getitem__(self, name: str) -> Command:
        try:
            return self.as_dict()[name]
        except KeyError:
            raise KeyError(f"unknown command '{name}'") from None

    def __iter__(self) -> Iterator[Command]:
        return iter(self.as_dict().values())
