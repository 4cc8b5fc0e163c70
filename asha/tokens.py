"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from asha.source import Span


class TokenKind(Enum):
    """Every kind of token; the value is how the kind is shown to users."""

    LOWER_IDENTIFIER = "lowercase identifier"
    UPPER_IDENTIFIER = "uppercase identifier"
    NUMBER = "number"
    STRING = "string"
    EQUAL = "`=`"
    STRUCT = "`struct`"
    EVAL = "`eval`"
    RECORD = "`record`"
    EXTERN = "`extern`"
    INDUCTIVE = "`inductive`"
    CLASS = "`class`"
    INSTANCE = "`instance`"
    COMMA = "`,`"
    COLON = "`:`"
    DOUBLE_COLON = "`::`"
    LBRACE = "`{`"
    RBRACE = "`}`"
    LPAREN = "`(`"
    RPAREN = "`)`"
    LBRACKET = "`[`"
    RBRACKET = "`]`"
    SEMICOLON = "`;`"
    ARROW = "`->`"
    PRODUCT = "`><`"
    END_OF_FILE = "end of file"
    DEF = "`def`"
    LET = "`let`"
    IN = "`in`"
    LAMBDA = "`\\` or `λ`"
    FAT_ARROW = "`=>`"
    DOT = "`.`"
    UNDERSCORE = "`_`"
    PLUS = "`+`"
    MINUS = "`-`"
    STAR = "`*`"
    SLASH = "`/`"
    EQUAL_EQUAL = "`==`"
    BANG_EQUAL = "`!=`"
    LESS = "`<`"
    GREATER = "`>`"
    LESS_EQUAL = "`<=`"
    GREATER_EQUAL = "`>=`"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A lexed token: its raw bytes, kind and location."""

    lexeme: bytes
    kind: TokenKind
    span: Span

    @property
    def text(self) -> str:
        """The lexeme decoded as UTF-8, replacing invalid sequences."""
        return self.lexeme.decode("utf-8", errors="replace")