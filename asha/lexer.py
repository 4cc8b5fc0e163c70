"""Splitting source bytes into tokens."""

from __future__ import annotations

from typing import Iterator, Optional

from asha.errors import LexError, LexErrorKind
from asha.source import LexerCursor, SourceFile, Span
from asha.tokens import Token, TokenKind

_WHITESPACE = frozenset(b" \t\r\n")

_KEYWORDS = {
    b"struct": TokenKind.STRUCT,
    b"def": TokenKind.DEF,
    b"let": TokenKind.LET,
    b"in": TokenKind.IN,
    b"eval": TokenKind.EVAL,
    b"record": TokenKind.RECORD,
    b"extern": TokenKind.EXTERN,
    b"inductive": TokenKind.INDUCTIVE,
    b"class": TokenKind.CLASS,
    b"instance": TokenKind.INSTANCE,
}

_SINGLE = {
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ";": TokenKind.SEMICOLON,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

# A one-byte operator that may be extended by a second byte.  A ``None``
# kind means the first byte alone is not a token.
_PAIRED: dict[str, tuple[Optional[TokenKind], dict[int, TokenKind]]] = {
    "=": (TokenKind.EQUAL, {ord(">"): TokenKind.FAT_ARROW, ord("="): TokenKind.EQUAL_EQUAL}),
    ":": (TokenKind.COLON, {ord(":"): TokenKind.DOUBLE_COLON}),
    "-": (TokenKind.MINUS, {ord(">"): TokenKind.ARROW}),
    ">": (TokenKind.GREATER, {ord("<"): TokenKind.PRODUCT, ord("="): TokenKind.GREATER_EQUAL}),
    "<": (TokenKind.LESS, {ord("="): TokenKind.LESS_EQUAL}),
    "!": (None, {ord("="): TokenKind.BANG_EQUAL}),
}

# Characters that form a token on their own, possibly several bytes long.
_WIDE = {
    "\\": TokenKind.LAMBDA,
    "→": TokenKind.ARROW,
    "×": TokenKind.PRODUCT,
}


def _is_ident_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_ident_continue(char: str) -> bool:
    return char.isalpha() or char in "0123456789_"


class Lexer:
    """An iterator over the tokens of a source file.

    Each step yields a :class:`Token`. An unrecognised character raises
    :class:`LexError`; the lexer has already moved past it, so iteration may
    be resumed. Lexing stops where the rest of the input is not valid UTF-8.
    """

    def __init__(self, source_file: SourceFile):
        self.source_file = source_file
        self.cursor = LexerCursor(source_file.id)
        try:
            source_file.source.decode("utf-8")
        except UnicodeDecodeError:
            self._valid = False
        else:
            self._valid = True

    def _char_at(self, offset: int) -> Optional[str]:
        """The character starting at ``offset``, or ``None`` if the rest of
        the input is empty or not valid UTF-8."""
        source = self.source_file.source
        if offset >= len(source):
            return None
        if self._valid:
            text = source[offset : offset + 4].decode("utf-8", errors="ignore")
            return text[:1] or None
        try:
            text = source[offset:].decode("utf-8")
        except UnicodeDecodeError:
            return None
        return text[:1] or None

    def __iter__(self) -> Iterator[Token]:
        return self

    def _token(self, kind: TokenKind, start: int) -> Token:
        end = self.cursor.byte_offset
        return Token(self.source_file.source[start:end], kind, self.cursor.span_from(start))

    def __next__(self) -> Token:
        source = self.source_file.source
        cursor = self.cursor

        while cursor.byte_offset < len(source) and source[cursor.byte_offset] in _WHITESPACE:
            cursor.advance(1)

        current = self._char_at(cursor.byte_offset)
        if current is None:
            raise StopIteration
        start = cursor.byte_offset

        if current in "0123456789":
            while cursor.byte_offset < len(source) and chr(source[cursor.byte_offset]) in "0123456789":
                cursor.advance(1)
            return self._token(TokenKind.NUMBER, start)

        if _is_ident_start(current):
            is_upper = current.isupper()
            while True:
                char = self._char_at(cursor.byte_offset)
                if char is None or not _is_ident_continue(char):
                    break
                cursor.advance_char(char)
            lexeme = source[start : cursor.byte_offset]
            kind = _KEYWORDS.get(lexeme)
            if kind is None:
                kind = TokenKind.UPPER_IDENTIFIER if is_upper else TokenKind.LOWER_IDENTIFIER
            return self._token(kind, start)

        if current == '"':
            cursor.advance(1)
            while cursor.byte_offset < len(source):
                closing = source[cursor.byte_offset] == ord('"')
                cursor.advance(1)
                if closing:
                    break
            return self._token(TokenKind.STRING, start)

        if current in _SINGLE:
            cursor.advance(1)
            return self._token(_SINGLE[current], start)

        if current in _PAIRED:
            alone, extensions = _PAIRED[current]
            cursor.advance(1)
            if cursor.byte_offset < len(source):
                extended = extensions.get(source[cursor.byte_offset])
                if extended is not None:
                    cursor.advance(1)
                    return self._token(extended, start)
            if alone is None:
                raise LexError(LexErrorKind.UNEXPECTED_CHAR, cursor.span_from(start), current)
            return self._token(alone, start)

        if current in _WIDE:
            cursor.advance_char(current)
            return self._token(_WIDE[current], start)

        cursor.advance_char(current)
        raise LexError(LexErrorKind.UNEXPECTED_CHAR, cursor.span_from(start), current)

    def read_all(self, limit: Optional[int] = None) -> list[Token]:
        """Collect tokens until the input ends, an error occurs, or ``limit``
        tokens have been gathered.

        When the limit is reached, the token that would have exceeded it has
        already been consumed from the input.
        """
        tokens: list[Token] = []
        while True:
            try:
                token = next(self)
            except (StopIteration, LexError):
                break
            if limit is not None and len(tokens) >= limit:
                break
            tokens.append(token)
        return tokens

    def eoi_span(self) -> Span:
        """An empty span at the lexer's current position."""
        return Span.empty(self.cursor.file, self.cursor.byte_offset)