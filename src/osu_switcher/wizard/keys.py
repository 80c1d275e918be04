"""Keyboard input for the wizard.

Raw terminal input (as returned by click.getchar) is decoded into KeyEvents so
the state machine never sees escape sequences or platform differences.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import click


class Key(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESCAPE = "escape"
    INTERRUPT = "interrupt"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key. For CHAR, `char` holds the text, which is longer than one
    character when a paste arrived in a single read.
    """

    key: Key
    char: str = ""

    @staticmethod
    def of(char: str) -> "KeyEvent":
        return KeyEvent(key=Key.CHAR, char=char)


_ANSI_SEQUENCES: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1b[H": Key.HOME,
    "\x1b[F": Key.END,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
    "\x1bOH": Key.HOME,
    "\x1bOF": Key.END,
    "\x1b[1~": Key.HOME,
    "\x1b[4~": Key.END,
    "\x1b[5~": Key.PAGE_UP,
    "\x1b[6~": Key.PAGE_DOWN,
}

# Windows console: scan codes following a \x00 or \xe0 prefix
_WINDOWS_SCAN_CODES: dict[str, Key] = {
    "H": Key.UP,
    "P": Key.DOWN,
    "K": Key.LEFT,
    "M": Key.RIGHT,
    "G": Key.HOME,
    "O": Key.END,
    "I": Key.PAGE_UP,
    "Q": Key.PAGE_DOWN,
}


def decode_key(raw: str) -> KeyEvent | None:
    """Decode one raw read from the terminal; returns None for keys the wizard doesn't use."""
    if raw in ("\r", "\n", "\r\n"):
        return KeyEvent(Key.ENTER)
    if raw in ("\x7f", "\x08"):
        return KeyEvent(Key.BACKSPACE)
    if raw == "\x03":
        return KeyEvent(Key.INTERRUPT)
    if raw == "\x1b":
        return KeyEvent(Key.ESCAPE)

    if raw in _ANSI_SEQUENCES:
        return KeyEvent(_ANSI_SEQUENCES[raw])

    if len(raw) == 2 and raw[0] in ("\x00", "\xe0"):
        key = _WINDOWS_SCAN_CODES.get(raw[1])
        if key is None:
            return None
        return KeyEvent(key)

    # A paste (or fast typing) arrives as one read; keep it as a single insert
    if raw and raw.isprintable():
        return KeyEvent.of(raw)
    return None


class KeySource(ABC):
    """Blocking source of key events."""

    @abstractmethod
    def read_key(self) -> KeyEvent:
        """Block until a key the wizard understands is pressed."""
        ...


class TerminalKeySource(KeySource):
    """Reads raw keypresses from the controlling terminal."""

    def read_key(self) -> KeyEvent:
        while True:
            try:
                raw = click.getchar()
            except (KeyboardInterrupt, EOFError):
                return KeyEvent(Key.INTERRUPT)
            event = decode_key(raw)
            if event is not None:
                return event
