import itertools

import pytest

from asha.color import Color, ColorCode


@pytest.mark.parametrize("color", list(Color))
def test_from_u8_round_trip(color):
    assert Color.from_u8(int(color)) is color


@pytest.mark.parametrize("value", [16, 100, 255])
def test_from_u8_unknown_is_white(value):
    assert Color.from_u8(value) is Color.WHITE


def test_white_on_black_code():
    assert ColorCode.from_colors(Color.WHITE, Color.BLACK).value == 15


def test_foreground_background_round_trip_all_pairs():
    for fg, bg in itertools.product(Color, Color):
        code = ColorCode.from_colors(fg, bg)
        assert code.foreground() is fg
        assert code.background() is bg


def test_flip_swaps_colors():
    for fg, bg in itertools.product(Color, Color):
        code = ColorCode.from_colors(fg, bg)
        flipped = code.flip()
        assert flipped == ColorCode.from_colors(bg, fg)
        assert flipped.flip() == code


def test_code_out_of_byte_range_rejected():
    with pytest.raises(ValueError):
        ColorCode(256)
    with pytest.raises(ValueError):
        ColorCode(-1)