# src/task_manager/ui/keys.py

"""Key events and the readchar-backed key source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

import readchar

logger = logging.getLogger(__name__)

_ESC = "\x1b"


class KeyKind(StrEnum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class KeyCode(StrEnum):
    """Named non-character keys. Values never collide with a single character."""

    ENTER = "<enter>"
    ESC = "<esc>"
    BACKSPACE = "<backspace>"
    UP = "<up>"
    DOWN = "<down>"
    UNKNOWN = "<unknown>"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    code: str
    kind: KeyKind = KeyKind.PRESS


_NAMED: dict[str, KeyCode] = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    readchar.key.ENTER: KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    readchar.key.BACKSPACE: KeyCode.BACKSPACE,
    _ESC: KeyCode.ESC,
    "\x1b[A": KeyCode.UP,
    "\x1bOA": KeyCode.UP,
    readchar.key.UP: KeyCode.UP,
    "\x1b[B": KeyCode.DOWN,
    "\x1bOB": KeyCode.DOWN,
    readchar.key.DOWN: KeyCode.DOWN,
}


def decode_key(raw: str) -> str:
    """Map a raw readchar key string to a single character or a KeyCode."""
    named = _NAMED.get(raw)
    if named is not None:
        return named
    # readkey() swallows the key typed after a lone Esc; treat the pair as Esc.
    if len(raw) == 2 and raw[0] == _ESC and raw[1] not in "[O":
        return KeyCode.ESC
    if len(raw) == 1:
        return raw
    return KeyCode.UNKNOWN


class ReadcharKeySource:
    """Blocks on the terminal for one key press at a time."""

    def read(self) -> KeyEvent:
        raw = readchar.readkey()
        code = decode_key(raw)
        if code is KeyCode.UNKNOWN:
            logger.debug("Unrecognized key sequence %r", raw)
        return KeyEvent(code)
