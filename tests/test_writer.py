import pytest

from asha.color import Color, ColorCode
from asha.font import glyph
from asha.writer import FramebufferInfo, TextWriter, color_to_rgb

WIDTH = 16
HEIGHT = 16

BLANK_CELL = bytes(8 * 8 * 3)


def make(pixel_format=0, fill=0):
    info = FramebufferInfo(0, WIDTH * HEIGHT * 4, WIDTH, HEIGHT, WIDTH, pixel_format)
    buffer = bytearray([fill]) * info.size
    return TextWriter(buffer, info), buffer, info


def pixel(buffer, x, y):
    offset = y * WIDTH * 4 + x * 4
    return bytes(buffer[offset : offset + 3])


def cell(buffer, col, row):
    return b"".join(
        pixel(buffer, col * 8 + x, row * 8 + y) for y in range(8) for x in range(8)
    )


def white_cell():
    return bytes(color_to_rgb(Color.WHITE)) * 64


def test_construction_clears_buffer():
    _, buffer, _ = make(fill=0xAA)
    assert buffer == bytearray(len(buffer))


def test_color_to_rgb_values():
    assert color_to_rgb(Color.BROWN) == (165, 42, 42)
    assert color_to_rgb(Color.WHITE) == (255, 255, 255)
    assert color_to_rgb(Color.BLACK) == (0, 0, 0)


def test_glyph_bits_drive_pixels():
    writer, buffer, _ = make()
    writer.set_byte_at(ord("A"), 1, 1, ColorCode.from_colors(Color.WHITE, Color.BLACK))
    rows = glyph(ord("A"))
    white = bytes(color_to_rgb(Color.WHITE))
    black = bytes(color_to_rgb(Color.BLACK))
    for y in range(8):
        for x in range(8):
            expected = white if (rows[y] >> x) & 1 else black
            assert pixel(buffer, 8 + x, 8 + y) == expected


def test_background_fills_space_rgb():
    writer, buffer, _ = make(pixel_format=0)
    writer.set_byte_at(ord(" "), 0, 0, ColorCode.from_colors(Color.BLACK, Color.RED))
    assert pixel(buffer, 0, 0) == bytes(color_to_rgb(Color.RED))


def test_background_fills_space_bgr():
    writer, buffer, _ = make(pixel_format=1)
    writer.set_byte_at(ord(" "), 0, 0, ColorCode.from_colors(Color.BLACK, Color.RED))
    assert pixel(buffer, 0, 0) == bytes(reversed(color_to_rgb(Color.RED)))


def test_grayscale_touches_only_first_byte():
    writer, buffer, _ = make(pixel_format=2)
    writer.set_byte_at(ord(" "), 0, 0, ColorCode.from_colors(Color.BLACK, Color.WHITE))
    assert buffer[0] > 0
    assert buffer[1:4] == bytearray(3)


def test_unsupported_format_raises():
    writer, _, _ = make(pixel_format=3)
    with pytest.raises(ValueError):
        writer.set_byte_at(ord("A"), 0, 0, ColorCode.from_colors(Color.WHITE, Color.BLACK))


def test_non_ascii_byte_raises():
    writer, _, _ = make()
    with pytest.raises(ValueError):
        writer.set_byte_at(200, 0, 0, ColorCode.from_colors(Color.WHITE, Color.BLACK))


def test_cell_outside_screen_is_ignored():
    writer, buffer, _ = make()
    writer.set_byte_at(ord(" "), 5, 0, ColorCode.from_colors(Color.WHITE, Color.WHITE))
    assert buffer == bytearray(len(buffer))


def test_clear_byte_at_blanks_cell():
    writer, buffer, _ = make()
    writer.set_byte_at(ord(" "), 1, 0, ColorCode.from_colors(Color.WHITE, Color.WHITE))
    assert cell(buffer, 1, 0) == white_cell()
    writer.clear_byte_at(1, 0)
    assert buffer == bytearray(len(buffer))


def test_clear_from_and_until_col():
    writer, buffer, _ = make()
    code = ColorCode.from_colors(Color.WHITE, Color.WHITE)
    writer.set_byte_at(ord(" "), 0, 0, code)
    writer.set_byte_at(ord(" "), 1, 0, code)
    writer.clear_from_col(1, 0)
    assert cell(buffer, 0, 0) == white_cell()
    assert cell(buffer, 1, 0) == BLANK_CELL
    writer.set_byte_at(ord(" "), 1, 0, code)
    writer.clear_until_col(1, 0)
    assert cell(buffer, 0, 0) == BLANK_CELL
    assert cell(buffer, 1, 0) == white_cell()


def test_scroll_up_moves_bottom_row_up():
    writer, buffer, info = make()
    writer.set_byte_at(ord("A"), 0, 1, ColorCode.from_colors(Color.WHITE, Color.BLUE))
    line = info.stride * 4
    bottom = bytes(buffer[8 * line : 16 * line])
    writer.scroll_up()
    assert bytes(buffer[0 : 8 * line]) == bottom
    assert buffer[8 * line : 16 * line] == bytearray(8 * line)


def test_clear_last_line():
    writer, buffer, _ = make()
    code = ColorCode.from_colors(Color.WHITE, Color.WHITE)
    writer.set_byte_at(ord(" "), 0, 0, code)
    writer.set_byte_at(ord(" "), 0, 1, code)
    writer.clear_last_line()
    assert cell(buffer, 0, 0) == white_cell()
    assert cell(buffer, 0, 1) == BLANK_CELL


def test_clear_screen():
    writer, buffer, _ = make()
    writer.set_byte_at(ord("Z"), 1, 1, ColorCode.from_colors(Color.WHITE, Color.GREEN))
    writer.clear_screen()
    assert buffer == bytearray(len(buffer))