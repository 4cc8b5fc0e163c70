"""A one-line shell prompt driven by keyboard scancodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from asha.color import Color, ColorCode
from asha.keyboard import AnyKey, Key, KeyboardState, KeyEvent
from asha.writer import TextWriter


class ActionKind(Enum):
    TYPE = auto()
    BACKSPACE = auto()
    ENTER = auto()
    TAB = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    IGNORE = auto()


@dataclass(frozen=True)
class KeyAction:
    """What a key press asks the prompt to do; ``char`` is set for typing."""

    kind: ActionKind
    char: Optional[str] = None


_SPECIAL_KEYS = {
    Key.BACKSPACE: ActionKind.BACKSPACE,
    Key.ENTER: ActionKind.ENTER,
    Key.TAB: ActionKind.TAB,
    Key.UP: ActionKind.ARROW_UP,
    Key.DOWN: ActionKind.ARROW_DOWN,
    Key.LEFT: ActionKind.ARROW_LEFT,
    Key.RIGHT: ActionKind.ARROW_RIGHT,
}

_CURSOR_COLOR = ColorCode.from_colors(Color.BLACK, Color.WHITE)


class Tty:
    """An editable input line drawn through a :class:`TextWriter`."""

    def __init__(self, writer: TextWriter, color_code: ColorCode):
        self.writer = writer
        self.color_code = color_code
        self.keyboard_state = KeyboardState()
        self.caps_lock_active = False
        self.cursor: tuple[int, int] = (0, 0)
        self.shell_prompt: Optional[str] = None
        self._line = bytearray()

    @property
    def line(self) -> bytes:
        """The text typed so far on the current line."""
        return bytes(self._line)

    def set_shell_prompt(self, prompt: str, prompt_color_code: ColorCode) -> None:
        """Draw ``prompt`` at the start of the cursor's row and type after it."""
        for i, byte in enumerate(prompt.encode("utf-8")):
            self.writer.set_byte_at(byte, i, self.cursor[1], prompt_color_code)
        self.shell_prompt = prompt

    def handle_input(self, scancode: int) -> Optional[bytes]:
        """Feed one scancode; returns the entered line when Enter is pressed."""
        event = KeyEvent.from_scancode(scancode)
        self.keyboard_state.update(scancode)
        if event.is_released():
            return None
        if event.key is Key.CAPS_LOCK:
            self.caps_lock_active = not self.caps_lock_active
            return None
        return self.perform_action(self._interpret_key(event.key))

    def perform_action(self, action: KeyAction) -> Optional[bytes]:
        """Apply ``action`` to the line; returns the line if it was entered."""
        col, row = self.cursor
        kind = action.kind
        if kind is ActionKind.TYPE:
            if action.char is None:
                raise ValueError("a typing action needs a character")
            byte = ord(action.char)
            if col < len(self._line):
                self._clear_from_col(col, row)
                self._line.insert(col, byte)
                for i in range(col, len(self._line)):
                    self._set_byte_at(self._line[i], i, row, self.color_code)
            else:
                self._line.append(byte)
                self._set_byte_at(byte, col, row, self.color_code)
            self._set_cursor(col + 1, row)
        elif kind is ActionKind.BACKSPACE:
            if col == 0:
                return None
            if col < len(self._line):
                self._clear_from_col(col - 1, row)
                for i in range(col, len(self._line)):
                    self._set_byte_at(self._line[i], i - 1, row, self.color_code)
            else:
                self._clear_byte_at(col - 1, row)
            del self._line[col - 1]
            self._set_cursor(col - 1, row)
        elif kind is ActionKind.ARROW_LEFT:
            self._set_cursor(max(col - 1, 0), row)
        elif kind is ActionKind.ARROW_RIGHT:
            self._set_cursor(col + 1, row)
        elif kind is ActionKind.ENTER:
            self._clear_from_col(0, row)
            entered = bytes(self._line)
            self._line = bytearray()
            self._set_cursor(0, row)
            return entered
        return None

    def _set_cursor(self, col: int, row: int) -> None:
        if col > len(self._line):
            return
        current_col, current_row = self.cursor
        if current_col < len(self._line):
            self._set_byte_at(self._line[current_col], current_col, current_row, self.color_code)
        else:
            self._clear_byte_at(current_col, current_row)
        next_char = self._line[col] if col < len(self._line) else ord(" ")
        self.cursor = (col, row)
        self._set_byte_at(next_char, col, row, _CURSOR_COLOR)

    def _offset_col(self) -> int:
        return len(self.shell_prompt.encode("utf-8")) if self.shell_prompt else 0

    def _set_byte_at(self, byte: int, col: int, row: int, color_code: ColorCode) -> None:
        self.writer.set_byte_at(byte, col + self._offset_col(), row, color_code)

    def _clear_byte_at(self, col: int, row: int) -> None:
        self.writer.clear_byte_at(col + self._offset_col(), row)

    def _clear_from_col(self, col: int, row: int) -> None:
        offset = self._offset_col()
        for c in range(col + offset, offset + len(self._line)):
            self.writer.clear_byte_at(c, row)

    def _interpret_key(self, key: AnyKey) -> KeyAction:
        special = _SPECIAL_KEYS.get(key) if isinstance(key, Key) else None
        if special is not None:
            return KeyAction(special)
        code = key.to_ascii(self._is_uppercase())
        if code is None:
            return KeyAction(ActionKind.IGNORE)
        return KeyAction(ActionKind.TYPE, chr(code))

    def _is_uppercase(self) -> bool:
        state = self.keyboard_state
        return (
            state.is_pressed(Key.LEFT_SHIFT)
            or state.is_pressed(Key.RIGHT_SHIFT)
            or self.caps_lock_active
        )