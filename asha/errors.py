"""Lexer and parser diagnostics."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from asha.source import Span
from asha.tokens import TokenKind


class Severity(Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    ADVICE = "advice"


@dataclass(frozen=True)
class Label:
    """A piece of text attached to a byte range of the source."""

    text: str
    offset: int
    length: int


def _is_ascii_punctuation(char: str) -> bool:
    return len(char) == 1 and char in string.punctuation


class LexErrorKind(Enum):
    UNEXPECTED_END_OF_INPUT = "E0001"
    INVALID_TOKEN = "E0002"
    UNTERMINATED_STRING = "E0003"
    UNEXPECTED_CHAR = "E0004"


_LEX_MESSAGES = {
    LexErrorKind.UNEXPECTED_END_OF_INPUT: "unexpected end of input",
    LexErrorKind.INVALID_TOKEN: "invalid token",
    LexErrorKind.UNTERMINATED_STRING: "unterminated string literal",
}

_LEX_HELP = {
    LexErrorKind.UNEXPECTED_END_OF_INPUT: (
        "the file ended unexpectedly, check for missing closing delimiters"
    ),
    LexErrorKind.INVALID_TOKEN: "this sequence of characters doesn't form a valid token",
    LexErrorKind.UNTERMINATED_STRING: 'add a closing `"` to terminate the string',
}

_LEX_LABELS = {
    LexErrorKind.UNEXPECTED_END_OF_INPUT: "input ended here",
    LexErrorKind.INVALID_TOKEN: "invalid token",
    LexErrorKind.UNTERMINATED_STRING: "string starts here but is never closed",
    LexErrorKind.UNEXPECTED_CHAR: "unexpected character",
}


class LexError(Exception):
    """An error found while splitting source text into tokens."""

    def __init__(self, kind: LexErrorKind, span: Span, char: Optional[str] = None):
        if kind is LexErrorKind.UNEXPECTED_CHAR and char is None:
            raise ValueError("an unexpected-character error needs the character")
        self.kind = kind
        self.span = span
        self.char = char
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.kind is LexErrorKind.UNEXPECTED_CHAR:
            return f"unexpected character `{self.char}`"
        return _LEX_MESSAGES[self.kind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexError):
            return NotImplemented
        return (self.kind, self.span, self.char) == (other.kind, other.span, other.char)

    def __hash__(self) -> int:
        return hash((self.kind, self.span, self.char))

    def __repr__(self) -> str:
        return f"LexError(kind={self.kind!r}, span={self.span!r}, char={self.char!r})"

    def code(self) -> str:
        return self.kind.value

    def severity(self) -> Severity:
        return Severity.ERROR

    def help(self) -> Optional[str]:
        if self.kind is LexErrorKind.UNEXPECTED_CHAR:
            if self.char is not None and _is_ascii_punctuation(self.char):
                return f"`{self.char}` is not a recognized operator or delimiter"
            return None
        return _LEX_HELP[self.kind]

    def labels(self) -> list[Label]:
        return [
            Label(
                _LEX_LABELS[self.kind],
                self.span.start,
                self.span.end - self.span.start,
            )
        ]


class ParseErrorKind(Enum):
    UNEXPECTED_TOKEN = "E0100"
    UNEXPECTED_END_OF_INPUT = "E0101"
    UNCLOSED_DELIMITER = "E0102"


def format_expected(expected: Sequence[TokenKind]) -> str:
    """List expected token kinds in prose: ``a``, ``a or b``, ``a, b or c``."""
    shown = [str(kind) for kind in expected]
    if not shown:
        return "something else"
    if len(shown) == 1:
        return shown[0]
    return f"{', '.join(shown[:-1])} or {shown[-1]}"


class ParseError(Exception):
    """An error found while building the syntax tree from tokens."""

    def __init__(
        self,
        kind: ParseErrorKind,
        span: Span,
        expected: Iterable[TokenKind] = (),
        found: Optional[TokenKind] = None,
        open: Optional[TokenKind] = None,
        expected_close: Optional[TokenKind] = None,
    ):
        if kind is ParseErrorKind.UNCLOSED_DELIMITER and (
            open is None or expected_close is None
        ):
            raise ValueError("an unclosed-delimiter error needs both delimiters")
        self.kind = kind
        self.span = span
        self.expected = tuple(expected)
        self.found = found
        self.open = open
        self.expected_close = expected_close
        super().__init__(str(self))

    def _key(self) -> tuple:
        return (
            self.kind,
            self.span,
            self.expected,
            self.found,
            self.open,
            self.expected_close,
        )

    def __str__(self) -> str:
        if self.kind is ParseErrorKind.UNEXPECTED_TOKEN:
            if self.found is not None:
                return f"unexpected {self.found}"
            return "unexpected token"
        if self.kind is ParseErrorKind.UNEXPECTED_END_OF_INPUT:
            return "unexpected end of input"
        return f"unclosed {self.open}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ParseError(kind={self.kind!r}, span={self.span!r}, "
            f"expected={self.expected!r}, found={self.found!r})"
        )

    def code(self) -> str:
        return self.kind.value

    def severity(self) -> Severity:
        return Severity.ERROR

    def help(self) -> Optional[str]:
        if self.kind is ParseErrorKind.UNEXPECTED_TOKEN:
            if self.expected:
                return f"expected {format_expected(self.expected)}"
            return None
        if self.kind is ParseErrorKind.UNEXPECTED_END_OF_INPUT:
            if self.expected:
                return f"expected {format_expected(self.expected)} before end of input"
            return "the input ended unexpectedly"
        return f"add {self.expected_close} to close the delimiter"

    def labels(self) -> list[Label]:
        if self.kind is ParseErrorKind.UNEXPECTED_TOKEN:
            if self.expected:
                text = f"expected {format_expected(self.expected)}"
            else:
                text = "unexpected"
        elif self.kind is ParseErrorKind.UNEXPECTED_END_OF_INPUT:
            text = "input ended here"
        else:
            text = f"this {self.open} is never closed"
        length = max(self.span.end - self.span.start, 1)
        return [Label(text, self.span.start, length)]