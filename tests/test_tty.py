from asha.color import Color, ColorCode
from asha.keyboard import Key
from asha.tty import ActionKind, KeyAction, Tty
from asha.writer import FramebufferInfo, TextWriter, color_to_rgb

WIDTH = 32 * 8
HEIGHT = 16

BLANK_CELL = bytes(8 * 32)


def make_tty():
    info = FramebufferInfo(0, WIDTH * HEIGHT * 4, WIDTH, HEIGHT, WIDTH, 0)
    buffer = bytearray(info.size)
    writer = TextWriter(buffer, info)
    return Tty(writer, ColorCode.from_colors(Color.WHITE, Color.BLACK)), buffer


def cell(buffer, col, row=0):
    out = bytearray()
    for y in range(8):
        start = (row * 8 + y) * WIDTH * 4 + col * 8 * 4
        out += buffer[start : start + 32]
    return bytes(out)


def press(tty, key):
    return tty.handle_input(key.to_scancode())


def release(tty, key):
    return tty.handle_input(key.to_scancode() | 0x80)


def type_keys(tty, keys):
    for key in keys:
        press(tty, key)
        release(tty, key)


def test_typed_line_is_returned_on_enter():
    tty, _ = make_tty()
    type_keys(tty, [Key.H, Key.I])
    assert press(tty, Key.ENTER) == b"hi"
    assert tty.line == b""
    assert tty.cursor == (0, 0)


def test_release_returns_none():
    tty, _ = make_tty()
    press(tty, Key.A)
    assert release(tty, Key.A) is None
    assert tty.line == b"a"


def test_shift_gives_uppercase():
    tty, _ = make_tty()
    press(tty, Key.LEFT_SHIFT)
    type_keys(tty, [Key.A, Key.NUM1])
    release(tty, Key.LEFT_SHIFT)
    type_keys(tty, [Key.B])
    assert press(tty, Key.ENTER) == b"A!b"


def test_caps_lock_toggles():
    tty, _ = make_tty()
    type_keys(tty, [Key.CAPS_LOCK])
    assert tty.caps_lock_active
    type_keys(tty, [Key.A, Key.CAPS_LOCK, Key.A])
    assert not tty.caps_lock_active
    assert tty.line == b"Aa"


def test_backspace_removes_last():
    tty, _ = make_tty()
    type_keys(tty, [Key.A, Key.B, Key.BACKSPACE])
    assert tty.line == b"a"
    assert tty.cursor == (1, 0)


def test_backspace_at_start_does_nothing():
    tty, _ = make_tty()
    assert press(tty, Key.BACKSPACE) is None
    assert tty.line == b""
    assert tty.cursor == (0, 0)


def test_insert_in_middle():
    tty, _ = make_tty()
    type_keys(tty, [Key.A, Key.C, Key.LEFT, Key.B])
    assert tty.cursor == (2, 0)
    assert press(tty, Key.ENTER) == b"abc"


def test_backspace_in_middle():
    tty, _ = make_tty()
    type_keys(tty, [Key.A, Key.B, Key.C, Key.LEFT, Key.BACKSPACE])
    assert tty.line == b"ac"
    assert tty.cursor == (1, 0)


def test_cursor_stays_within_line():
    tty, _ = make_tty()
    type_keys(tty, [Key.A, Key.RIGHT, Key.RIGHT])
    assert tty.cursor == (1, 0)
    type_keys(tty, [Key.LEFT, Key.LEFT, Key.LEFT])
    assert tty.cursor == (0, 0)


def test_unhandled_actions_return_none():
    tty, _ = make_tty()
    type_keys(tty, [Key.A])
    assert tty.perform_action(KeyAction(ActionKind.TAB)) is None
    assert tty.perform_action(KeyAction(ActionKind.IGNORE)) is None
    assert press(tty, Key.F1) is None
    assert tty.line == b"a"


def test_prompt_offsets_drawing():
    tty, buffer = make_tty()
    tty.set_shell_prompt("> ", ColorCode.from_colors(Color.GREEN, Color.BLACK))
    assert cell(buffer, 0) != BLANK_CELL
    assert cell(buffer, 2) == BLANK_CELL
    type_keys(tty, [Key.A])
    assert cell(buffer, 2) != BLANK_CELL
    white = bytes(color_to_rgb(Color.WHITE))
    # The cursor is drawn after the typed character with a white background.
    assert cell(buffer, 3)[0:3] == white


def test_enter_clears_typed_text():
    tty, buffer = make_tty()
    type_keys(tty, [Key.A, Key.B])
    assert press(tty, Key.ENTER) == b"ab"
    assert cell(buffer, 1) == BLANK_CELL
    assert cell(buffer, 2) == BLANK_CELL