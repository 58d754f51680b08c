"""Keyboard events and small key-handling helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional


class Key(enum.Enum):
    """Keys that the interface reacts to."""

    RUNE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PG_UP = enum.auto()
    PG_DN = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    TAB = enum.auto()
    BACKTAB = enum.auto()
    BACKSPACE = enum.auto()
    BACKSPACE2 = enum.auto()
    DELETE = enum.auto()
    CTRL_A = enum.auto()
    CTRL_V = enum.auto()


class Modifier(enum.Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CTRL = enum.auto()
    ALT = enum.auto()
    META = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``rune`` is the typed character or empty."""

    key: Key
    rune: str = ""
    modifiers: Modifier = Modifier.NONE

    def __post_init__(self) -> None:
        if len(self.rune) > 1:
            raise ValueError(f"rune must be a single character, got {self.rune!r}")
        if self.key is Key.RUNE and not self.rune:
            raise ValueError("a rune event needs a character")


KeyHandler = Callable[[KeyEvent], Optional[KeyEvent]]


def focus_on_type_handler(
    focus: Callable[[], None], forward: Optional[Callable[[KeyEvent], object]]
) -> KeyHandler:
    """Build a handler that moves focus elsewhere as soon as the user types.

    Typed characters without modifiers call ``focus`` and are passed on to
    ``forward``; the event is then consumed. Everything else is returned.
    """

    def handler(event: KeyEvent) -> Optional[KeyEvent]:
        if event.modifiers == Modifier.NONE:
            if event.key is Key.ENTER:
                return event
            if event.rune and forward is not None:
                focus()
                forward(event)
                return None
        return event

    return handler