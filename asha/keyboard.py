"""Keys of a PC keyboard, scancode set 1, and the state of held keys."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """A known key."""

    ESCAPE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    BACKTICK = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()
    NUM0 = auto()
    MINUS = auto()
    EQUALS = auto()
    BACKSPACE = auto()
    TAB = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    BACKSLASH = auto()
    CAPS_LOCK = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    SEMICOLON = auto()
    QUOTE = auto()
    ENTER = auto()
    LEFT_SHIFT = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    N = auto()
    M = auto()
    COMMA = auto()
    DOT = auto()
    SLASH = auto()
    RIGHT_SHIFT = auto()
    LEFT_CTRL = auto()
    LEFT_ALT = auto()
    SPACE = auto()
    RIGHT_ALT = auto()
    RIGHT_CTRL = auto()
    PRINT_SCREEN = auto()
    SCROLL_LOCK = auto()
    PAUSE = auto()
    INSERT = auto()
    HOME = auto()
    PAGE_UP = auto()
    DELETE = auto()
    END = auto()
    PAGE_DOWN = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    NUM_LOCK = auto()

    def to_ascii(self, shift: bool) -> Optional[int]:
        """The ASCII byte this key types, or ``None`` if it types nothing."""
        return _ascii_for(self, shift)

    def to_scancode(self) -> Optional[int]:
        """The make code of this key, or ``None`` if it has no single-byte code."""
        return _SCANCODES.get(self)


@dataclass(frozen=True)
class UnknownKey:
    """A key whose scancode is not recognised."""

    code: int

    def to_ascii(self, shift: bool) -> Optional[int]:
        """Unknown keys are absent from the character table, so this is ``None``."""
        return _ascii_for(self, shift)

    def to_scancode(self) -> Optional[int]:
        """Unknown keys have no entry in the scancode table, so this is ``None``."""
        return _SCANCODES.get(self)


AnyKey = Union[Key, UnknownKey]


_SCANCODES: dict[AnyKey, int] = {
    Key.ESCAPE: 0x01,
    Key.NUM1: 0x02,
    Key.NUM2: 0x03,
    Key.NUM3: 0x04,
    Key.NUM4: 0x05,
    Key.NUM5: 0x06,
    Key.NUM6: 0x07,
    Key.NUM7: 0x08,
    Key.NUM8: 0x09,
    Key.NUM9: 0x0A,
    Key.NUM0: 0x0B,
    Key.MINUS: 0x0C,
    Key.EQUALS: 0x0D,
    Key.BACKSPACE: 0x0E,
    Key.TAB: 0x0F,
    Key.Q: 0x10,
    Key.W: 0x11,
    Key.E: 0x12,
    Key.R: 0x13,
    Key.T: 0x14,
    Key.Y: 0x15,
    Key.U: 0x16,
    Key.I: 0x17,
    Key.O: 0x18,
    Key.P: 0x19,
    Key.LEFT_BRACKET: 0x1A,
    Key.RIGHT_BRACKET: 0x1B,
    Key.ENTER: 0x1C,
    Key.LEFT_CTRL: 0x1D,
    Key.A: 0x1E,
    Key.S: 0x1F,
    Key.D: 0x20,
    Key.F: 0x21,
    Key.G: 0x22,
    Key.H: 0x23,
    Key.J: 0x24,
    Key.K: 0x25,
    Key.L: 0x26,
    Key.SEMICOLON: 0x27,
    Key.QUOTE: 0x28,
    Key.BACKTICK: 0x29,
    Key.LEFT_SHIFT: 0x2A,
    Key.BACKSLASH: 0x2B,
    Key.Z: 0x2C,
    Key.X: 0x2D,
    Key.C: 0x2E,
    Key.V: 0x2F,
    Key.B: 0x30,
    Key.N: 0x31,
    Key.M: 0x32,
    Key.COMMA: 0x33,
    Key.DOT: 0x34,
    Key.SLASH: 0x35,
    Key.RIGHT_SHIFT: 0x36,
    Key.LEFT_ALT: 0x38,
    Key.SPACE: 0x39,
    Key.CAPS_LOCK: 0x3A,
    Key.F1: 0x3B,
    Key.F2: 0x3C,
    Key.F3: 0x3D,
    Key.F4: 0x3E,
    Key.F5: 0x3F,
    Key.F6: 0x40,
    Key.F7: 0x41,
    Key.F8: 0x42,
    Key.F9: 0x43,
    Key.F10: 0x44,
    Key.NUM_LOCK: 0x45,
    Key.SCROLL_LOCK: 0x46,
    Key.HOME: 0x47,
    Key.UP: 0x48,
    Key.PAGE_UP: 0x49,
    Key.LEFT: 0x4B,
    Key.RIGHT: 0x4D,
    Key.END: 0x4F,
    Key.DOWN: 0x50,
    Key.PAGE_DOWN: 0x51,
    Key.INSERT: 0x52,
    Key.DELETE: 0x53,
    Key.F11: 0x57,
    Key.F12: 0x58,
}

_KEYS_BY_SCANCODE: dict[int, AnyKey] = {code: key for key, code in _SCANCODES.items()}

# Unshifted and shifted character of each key that types something.
_ASCII: dict[AnyKey, tuple[str, str]] = {
    Key[letter]: (letter.lower(), letter) for letter in string.ascii_uppercase
}
_ASCII.update(
    {
        Key[f"NUM{digit}"]: (digit, shifted)
        for digit, shifted in zip("1234567890", "!@#$%^&*()")
    }
)
_ASCII.update(
    {
        Key.MINUS: ("-", "_"),
        Key.EQUALS: ("=", "+"),
        Key.LEFT_BRACKET: ("[", "{"),
        Key.RIGHT_BRACKET: ("]", "}"),
        Key.BACKSLASH: ("\\", "|"),
        Key.SEMICOLON: (";", ":"),
        Key.QUOTE: ("'", '"'),
        Key.BACKTICK: ("`", "~"),
        Key.COMMA: (",", "<"),
        Key.DOT: (".", ">"),
        Key.SLASH: ("/", "?"),
        Key.SPACE: (" ", " "),
        Key.ENTER: ("\n", "\n"),
        Key.TAB: ("\t", "\t"),
        Key.BACKSPACE: ("\x08", "\x08"),
    }
)


def _ascii_for(key: AnyKey, shift: bool) -> Optional[int]:
    pair = _ASCII.get(key)
    if pair is None:
        return None
    return ord(pair[1] if shift else pair[0])


def key_from_scancode(code: int) -> AnyKey:
    """The key with make code ``code``, or an :class:`UnknownKey`."""
    key = _KEYS_BY_SCANCODE.get(code)
    return key if key is not None else UnknownKey(code)


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (``pressed``) or coming up."""

    key: AnyKey
    pressed: bool

    @classmethod
    def from_scancode(cls, scancode: int) -> "KeyEvent":
        """Decode a scancode; the high bit marks a release."""
        if scancode & 0x80:
            return cls(key_from_scancode(scancode & 0x7F), pressed=False)
        return cls(key_from_scancode(scancode), pressed=True)

    def is_pressed(self) -> bool:
        return self.pressed

    def is_released(self) -> bool:
        return not self.pressed


@dataclass
class KeyboardState:
    """Which keys are held down, one bit per make code."""

    bits: int = 0

    @staticmethod
    def _bit(scancode: int) -> int:
        if not 0 <= scancode < 128:
            raise ValueError(f"scancode {scancode} is out of range")
        return 1 << scancode

    def update(self, scancode: int) -> None:
        """Record a raw scancode: a press, or a release if the high bit is set."""
        key = scancode & 0x7F
        if scancode & 0x80 == 0:
            self.press(key)
        else:
            self.release(key)

    def press(self, scancode: int) -> None:
        self.bits |= self._bit(scancode)

    def release(self, scancode: int) -> None:
        self.bits &= ~self._bit(scancode)

    def is_pressed(self, key: AnyKey) -> bool:
        scancode = key.to_scancode()
        if scancode is None:
            return False
        return bool(self.bits & (1 << scancode))