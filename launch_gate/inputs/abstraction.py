from __future__ import annotations

from enum import Enum, auto


class InputEvent:
    class Type(Enum):
        NAVIGATE = auto()  # move between chooser rows
        ADJUST = auto()  # change the value of the focused row
        SELECT = auto()
        QUIT = auto()

    def __init__(self, type_: "InputEvent.Type", delta: int = 0) -> None:
        self.type = type_
        self.delta = delta


class InputProvider:
    def translate(self, raw_event):  # type: ignore[no-untyped-def]
        raise NotImplementedError
