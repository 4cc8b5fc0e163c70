"""The sixteen text-mode colours and a packed foreground/background pair."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    """A text-mode colour; the value is its four-bit code."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    PINK = 13
    YELLOW = 14
    WHITE = 15

    @classmethod
    def from_u8(cls, value: int) -> "Color":
        """The colour with code ``value``; unknown codes give white."""
        try:
            return cls(value)
        except ValueError:
            return cls.WHITE


@dataclass(frozen=True)
class ColorCode:
    """A byte holding the background colour in the high nibble and the
    foreground colour in the low nibble."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"colour code {self.value} does not fit in a byte")

    @classmethod
    def from_colors(cls, foreground: Color, background: Color) -> "ColorCode":
        """Pack a foreground and a background colour."""
        return cls((int(background) << 4) | int(foreground))

    def flip(self) -> "ColorCode":
        """The code with foreground and background swapped."""
        fg = self.value & 0x0F
        bg = (self.value & 0xF0) >> 4
        return ColorCode((fg << 4) | bg)

    def foreground(self) -> Color:
        return Color.from_u8(self.value & 0x0F)

    def background(self) -> Color:
        return Color.from_u8((self.value & 0xF0) >> 4)