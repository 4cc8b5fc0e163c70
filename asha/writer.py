"""Drawing 8x8 text cells onto a linear framebuffer."""

from __future__ import annotations

from dataclasses import dataclass

from asha.color import Color, ColorCode
from asha.font import glyph

CELL_SIZE = 8

_RGB: dict[Color, tuple[int, int, int]] = {
    Color.BLACK: (0, 0, 0),
    Color.BLUE: (0, 0, 255),
    Color.GREEN: (0, 255, 0),
    Color.CYAN: (0, 255, 255),
    Color.RED: (255, 0, 0),
    Color.MAGENTA: (255, 0, 255),
    Color.BROWN: (165, 42, 42),
    Color.LIGHT_GRAY: (211, 211, 211),
    Color.DARK_GRAY: (169, 169, 169),
    Color.LIGHT_BLUE: (173, 216, 230),
    Color.LIGHT_GREEN: (144, 238, 144),
    Color.LIGHT_CYAN: (224, 255, 255),
    Color.LIGHT_RED: (255, 182, 193),
    Color.PINK: (255, 192, 203),
    Color.YELLOW: (255, 255, 0),
    Color.WHITE: (255, 255, 255),
}


def color_to_rgb(color: Color) -> tuple[int, int, int]:
    """The red, green and blue components used to draw ``color``."""
    return _RGB[Color(color)]


@dataclass(frozen=True)
class FramebufferInfo:
    """Geometry and pixel layout of a framebuffer.

    ``pixel_format`` 0 stores red, green, blue; 1 stores blue, green, red;
    2 stores one grey byte per pixel.
    """

    base: int
    size: int
    width: int
    height: int
    stride: int
    pixel_format: int

    @property
    def bytes_per_pixel(self) -> int:
        return 4

    @property
    def bytes_per_line(self) -> int:
        return self.stride * self.bytes_per_pixel


class TextWriter:
    """Renders characters into a mutable byte buffer holding the framebuffer."""

    def __init__(self, buffer: bytearray, info: FramebufferInfo):
        self.buffer = buffer
        self.info = info
        self.clear_screen()

    def _write_pixel(self, x: int, y: int, color: tuple[int, int, int]) -> None:
        info = self.info
        bpp = info.bytes_per_pixel
        if x >= info.width or y >= info.height:
            return
        offset = y * info.bytes_per_line + x * bpp
        if offset + bpp > len(self.buffer):
            return
        red, green, blue = color
        if info.pixel_format == 0:
            self.buffer[offset : offset + 3] = bytes((red, green, blue))
        elif info.pixel_format == 1:
            self.buffer[offset : offset + 3] = bytes((blue, green, red))
        elif info.pixel_format == 2:
            gray = int(red * 0.299 + green * 0.587 + blue * 0.114)
            self.buffer[offset] = min(gray, 255)
        else:
            raise ValueError(f"unsupported pixel format {info.pixel_format}")

    def _zero(self, start: int, end: int) -> None:
        self.buffer[start:end] = bytes(end - start)

    def scroll_up(self) -> None:
        """Move the picture up by one text row and blank the bottom row."""
        info = self.info
        if info.height < CELL_SIZE:
            raise ValueError("framebuffer is shorter than one text row")
        bytes_per_line = info.bytes_per_line
        source_start = CELL_SIZE * bytes_per_line
        copy_size = (info.height - CELL_SIZE) * bytes_per_line
        if source_start + copy_size <= len(self.buffer):
            self.buffer[0:copy_size] = self.buffer[source_start : source_start + copy_size]
        clear_start = (info.height - CELL_SIZE) * bytes_per_line
        if clear_start < len(self.buffer):
            clear_end = min(clear_start + CELL_SIZE * bytes_per_line, len(self.buffer))
            self._zero(clear_start, clear_end)

    def clear_screen(self) -> None:
        """Set every visible byte to zero."""
        total = self.info.height * self.info.bytes_per_line
        self._zero(0, min(total, len(self.buffer)))

    def set_byte_at(self, byte: int, col: int, row: int, color_code: ColorCode) -> None:
        """Draw character ``byte`` in the text cell at ``col``, ``row``."""
        self._set_byte(byte, col * CELL_SIZE, row * CELL_SIZE, color_code)

    def _set_byte(self, byte: int, x0: int, y0: int, color_code: ColorCode) -> None:
        rows = glyph(byte)
        fg = color_to_rgb(color_code.foreground())
        bg = color_to_rgb(color_code.background())
        for y, row_data in enumerate(rows):
            for x in range(CELL_SIZE):
                self._write_pixel(x0 + x, y0 + y, fg if (row_data >> x) & 1 else bg)

    def _clear_byte(self, x0: int, y0: int) -> None:
        for y in range(CELL_SIZE):
            for x in range(CELL_SIZE):
                self._write_pixel(x0 + x, y0 + y, (0, 0, 0))

    def clear_byte_at(self, col: int, row: int) -> None:
        """Blank the text cell at ``col``, ``row``."""
        self._clear_byte(col * CELL_SIZE, row * CELL_SIZE)

    def clear_from_col(self, col: int, row: int) -> None:
        """Blank the cells of ``row`` from ``col`` to the right edge."""
        for c in range(col, self.info.width // CELL_SIZE):
            self._clear_byte(c * CELL_SIZE, row * CELL_SIZE)

    def clear_until_col(self, col: int, row: int) -> None:
        """Blank the cells of ``row`` before ``col``."""
        for c in range(col):
            self._clear_byte(c * CELL_SIZE, row * CELL_SIZE)

    def clear_last_line(self) -> None:
        """Blank the bottom text row."""
        info = self.info
        start = (info.height - CELL_SIZE) * info.bytes_per_line
        end = info.height * info.bytes_per_line
        if end <= len(self.buffer):
            self._zero(start, end)