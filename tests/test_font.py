import pytest

from asha.font import FONT8X8_BASIC, glyph


def test_font_size():
    assert len(b"".join(glyph(code) for code in range(128))) == 1024


def test_control_characters_are_blank():
    for code in range(0x20):
        assert glyph(code) == bytes(8)
    assert glyph(0x7F) == bytes(8)
    assert glyph(ord(" ")) == bytes(8)


def test_exclamation_glyph():
    assert glyph(ord("!")) == bytes([0x18, 0x3C, 0x3C, 0x18, 0x18, 0x00, 0x18, 0x00])


def test_letter_a_glyph():
    assert glyph(ord("A")) == bytes([0x0C, 0x1E, 0x33, 0x33, 0x3F, 0x33, 0x33, 0x00])


def test_underscore_last_row_full():
    assert glyph(ord("_"))[7] == 0xFF


def test_every_printable_glyph_has_ink():
    for code in range(0x21, 0x7F):
        rows = glyph(code)
        assert len(rows) == 8
        assert any(rows)


def test_glyphs_concatenate_to_font():
    assert b"".join(glyph(code) for code in range(128)) == FONT8X8_BASIC


@pytest.mark.parametrize("code", [-1, 128, 255])
def test_out_of_range_rejected(code):
    with pytest.raises(ValueError):
        glyph(code)