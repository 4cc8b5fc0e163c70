"""Source files, byte spans and the cursor the lexer moves through a file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Span:
    """A half-open byte range ``[start, end)`` inside one source file."""

    file: int
    start: int
    end: int

    @classmethod
    def empty(cls, file: int, offset: int) -> "Span":
        """A zero-length span at ``offset``."""
        return cls(file, offset, offset)

    def __len__(self) -> int:
        return max(self.end - self.start, 0)


@dataclass(frozen=True)
class SourceFile:
    """The bytes of one source file together with its identity."""

    id: int
    name: str
    source: bytes
    package: Optional[str] = None

    def line_col(self, byte_offset: int) -> tuple[int, int]:
        """One-based line and column of ``byte_offset``, counted in bytes."""
        before = self.source[: max(byte_offset, 0)]
        line = before.count(b"\n") + 1
        last_newline = before.rfind(b"\n")
        col = len(before) - last_newline if last_newline >= 0 else len(before) + 1
        return line, col


@dataclass
class LexerCursor:
    """The lexer's current position within a file."""

    file: int
    byte_offset: int = 0

    def advance(self, count: int) -> None:
        """Move forward by ``count`` bytes."""
        self.byte_offset += count

    def advance_char(self, char: str) -> None:
        """Move forward over one character encoded as UTF-8."""
        self.byte_offset += len(char.encode("utf-8"))

    def span_from(self, start: int) -> Span:
        """The span from ``start`` up to the current position."""
        return Span(self.file, start, self.byte_offset)


def _span_of(item: Union[Span, object]) -> Span:
    if isinstance(item, Span):
        return item
    return item.span  # type: ignore[attr-defined]


def spanning(a: object, b: object) -> Span:
    """The smallest span covering both ``a`` and ``b``.

    Either argument may be a :class:`Span` or anything with a ``span``
    attribute. Raises :class:`ValueError` if they lie in different files.
    """
    span_a = _span_of(a)
    span_b = _span_of(b)
    if span_a.file != span_b.file:
        raise ValueError("cannot span across different files")
    return Span(
        span_a.file,
        min(span_a.start, span_b.start),
        max(span_a.end, span_b.end),
    )