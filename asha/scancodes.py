"""A fixed-size ring of scancodes handed from the interrupt handler to the shell."""

from __future__ import annotations

from typing import Optional

CAPACITY = 256


class ScancodeQueue:
    """A single-producer, single-consumer ring of 256 scancodes.

    Writers never wait: pushing more than 256 unread codes overwrites the
    oldest slots, which the reader then sees in their place.
    """

    def __init__(self) -> None:
        self._slots = bytearray(CAPACITY)
        self._write = 0
        self._read = 0

    def push(self, scancode: int) -> None:
        """Store ``scancode`` (0 to 255) in the next slot."""
        self._slots[self._write % CAPACITY] = scancode
        self._write += 1

    def pop(self) -> Optional[int]:
        """The oldest unread scancode, or ``None`` if none is waiting."""
        if self._read == self._write:
            return None
        code = self._slots[self._read % CAPACITY]
        self._read += 1
        return code

    def __len__(self) -> int:
        return self._write - self._read