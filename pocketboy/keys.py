"""Joypad state and the JOYP register."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pocketboy.bits import reset_bit, set_bit

JOYP_INTERRUPT = 0x10


class Key(Enum):
    """Keyboard keys bound to joypad buttons."""

    Z = auto()
    X = auto()
    ENTER = auto()
    SPACE = auto()
    DOWN = auto()
    UP = auto()
    LEFT = auto()
    RIGHT = auto()


_DIRECTIONAL = "directional_buttons"
_SELECT = "select_buttons"

_KEY_BITS: dict[Key, tuple[str, int]] = {
    Key.DOWN: (_DIRECTIONAL, 3),
    Key.UP: (_DIRECTIONAL, 2),
    Key.LEFT: (_DIRECTIONAL, 1),
    Key.RIGHT: (_DIRECTIONAL, 0),
    Key.ENTER: (_SELECT, 3),
    Key.SPACE: (_SELECT, 2),
    Key.X: (_SELECT, 1),
    Key.Z: (_SELECT, 0),
}

_KEY_CODES: dict[str, Key] = {
    "ArrowDown": Key.DOWN,
    "ArrowUp": Key.UP,
    "ArrowLeft": Key.LEFT,
    "ArrowRight": Key.RIGHT,
    "Enter": Key.ENTER,
    "Space": Key.SPACE,
    "KeyX": Key.X,
    "KeyZ": Key.Z,
}


@dataclass
class KeyState:
    """Button lines of the joypad; a cleared bit means the button is held."""

    column: int = 0x0
    select_buttons: int = 0xF
    directional_buttons: int = 0xF

    def write_joyp(self, value: int) -> None:
        """Select the button column from a JOYP write."""
        self.column = value & 0x30

    def read_joyp(self) -> int:
        """Return the JOYP register for the selected column."""
        if self.column == 0x20:
            return 0x20 | self.directional_buttons
        if self.column == 0x10:
            return 0x10 | self.select_buttons
        return 0x3F

    def press(self, key: Key) -> int:
        """Mark ``key`` as held and return the interrupt flag to raise."""
        attribute, bit = _KEY_BITS[key]
        setattr(self, attribute, reset_bit(getattr(self, attribute), bit))
        return JOYP_INTERRUPT

    def release(self, key: Key) -> None:
        """Mark ``key`` as released."""
        attribute, bit = _KEY_BITS[key]
        setattr(self, attribute, set_bit(getattr(self, attribute), bit))


def key_from_code(key_code: str) -> Key | None:
    """Map a browser-style key code to a joypad key, or None if unbound."""
    return _KEY_CODES.get(key_code)