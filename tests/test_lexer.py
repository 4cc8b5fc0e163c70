import pytest

from asha.errors import LexError, LexErrorKind
from asha.lexer import Lexer
from asha.source import SourceFile, Span
from asha.tokens import TokenKind


def make_lexer(text, file_id=0):
    data = text if isinstance(text, bytes) else text.encode("utf-8")
    return Lexer(SourceFile(file_id, "test.asha", data))


def kinds(text):
    return [token.kind for token in make_lexer(text)]


def lexemes(text):
    return [token.lexeme for token in make_lexer(text)]


@pytest.mark.parametrize(
    "word,kind",
    [
        ("struct", TokenKind.STRUCT),
        ("def", TokenKind.DEF),
        ("let", TokenKind.LET),
        ("in", TokenKind.IN),
        ("eval", TokenKind.EVAL),
        ("record", TokenKind.RECORD),
        ("extern", TokenKind.EXTERN),
        ("inductive", TokenKind.INDUCTIVE),
        ("class", TokenKind.CLASS),
        ("instance", TokenKind.INSTANCE),
    ],
)
def test_keywords(word, kind):
    assert kinds(word) == [kind]


def test_identifiers_by_case():
    assert kinds("foo Bar defs _x") == [
        TokenKind.LOWER_IDENTIFIER,
        TokenKind.UPPER_IDENTIFIER,
        TokenKind.LOWER_IDENTIFIER,
        TokenKind.LOWER_IDENTIFIER,
    ]


def test_identifier_with_digits_and_unicode():
    assert lexemes("x1_y Ωmega") == [b"x1_y", "Ωmega".encode("utf-8")]
    assert kinds("Ωmega") == [TokenKind.UPPER_IDENTIFIER]


def test_lone_underscore_is_identifier():
    assert kinds("_") == [TokenKind.LOWER_IDENTIFIER]


def test_numbers():
    assert [(t.kind, t.lexeme) for t in make_lexer("42 007")] == [
        (TokenKind.NUMBER, b"42"),
        (TokenKind.NUMBER, b"007"),
    ]


def test_number_then_identifier():
    assert kinds("12ab") == [TokenKind.NUMBER, TokenKind.LOWER_IDENTIFIER]


def test_string_keeps_quotes():
    tokens = list(make_lexer('"hi there" x'))
    assert tokens[0].kind is TokenKind.STRING
    assert tokens[0].lexeme == b'"hi there"'
    assert tokens[1].kind is TokenKind.LOWER_IDENTIFIER


def test_unterminated_string_runs_to_end():
    tokens = list(make_lexer('"open'))
    assert [t.kind for t in tokens] == [TokenKind.STRING]
    assert tokens[0].lexeme == b'"open'


@pytest.mark.parametrize(
    "text,expected",
    [
        ("=", [TokenKind.EQUAL]),
        ("=>", [TokenKind.FAT_ARROW]),
        ("==", [TokenKind.EQUAL_EQUAL]),
        (":", [TokenKind.COLON]),
        ("::", [TokenKind.DOUBLE_COLON]),
        ("-", [TokenKind.MINUS]),
        ("->", [TokenKind.ARROW]),
        ("→", [TokenKind.ARROW]),
        (">", [TokenKind.GREATER]),
        ("><", [TokenKind.PRODUCT]),
        ("×", [TokenKind.PRODUCT]),
        (">=", [TokenKind.GREATER_EQUAL]),
        ("<", [TokenKind.LESS]),
        ("<=", [TokenKind.LESS_EQUAL]),
        ("!=", [TokenKind.BANG_EQUAL]),
        ("\\", [TokenKind.LAMBDA]),
        (".", [TokenKind.DOT]),
        (",", [TokenKind.COMMA]),
        ("{}", [TokenKind.LBRACE, TokenKind.RBRACE]),
        ("()", [TokenKind.LPAREN, TokenKind.RPAREN]),
        ("[]", [TokenKind.LBRACKET, TokenKind.RBRACKET]),
        (";", [TokenKind.SEMICOLON]),
        ("+*/", [TokenKind.PLUS, TokenKind.STAR, TokenKind.SLASH]),
    ],
)
def test_operators_and_delimiters(text, expected):
    assert kinds(text) == expected


def test_def_line():
    assert kinds("def id (x : Nat) : Nat = x") == [
        TokenKind.DEF,
        TokenKind.LOWER_IDENTIFIER,
        TokenKind.LPAREN,
        TokenKind.LOWER_IDENTIFIER,
        TokenKind.COLON,
        TokenKind.UPPER_IDENTIFIER,
        TokenKind.RPAREN,
        TokenKind.COLON,
        TokenKind.UPPER_IDENTIFIER,
        TokenKind.EQUAL,
        TokenKind.LOWER_IDENTIFIER,
    ]


def test_spans_cover_lexemes():
    text = "let  x\t=\n 10 → \"s\" in λ"
    data = text.encode("utf-8")
    for token in make_lexer(data, file_id=3):
        assert token.span.file == 3
        assert data[token.span.start : token.span.end] == token.lexeme


def test_pinned_span_of_multibyte_arrow():
    token = next(make_lexer("→"))
    assert token.span == Span(0, 0, 3)


def test_empty_and_whitespace_input():
    assert list(make_lexer("")) == []
    assert list(make_lexer(" \t\r\n ")) == []


def test_bang_alone_raises():
    lexer = make_lexer("!")
    with pytest.raises(LexError) as info:
        next(lexer)
    assert info.value.kind is LexErrorKind.UNEXPECTED_CHAR
    assert info.value.char == "!"
    assert info.value.span == Span(0, 0, 1)


def test_unknown_character_raises_and_lexing_resumes():
    lexer = make_lexer("a @ b")
    assert next(lexer).lexeme == b"a"
    with pytest.raises(LexError) as info:
        next(lexer)
    assert info.value.char == "@"
    assert str(info.value) == "unexpected character `@`"
    assert next(lexer).lexeme == b"b"
    with pytest.raises(StopIteration):
        next(lexer)


def test_unknown_multibyte_character_span():
    lexer = make_lexer("€ x")
    with pytest.raises(LexError) as info:
        next(lexer)
    assert info.value.char == "€"
    assert info.value.span == Span(0, 0, 3)
    token = next(lexer)
    assert token.lexeme == b"x"
    assert token.span == Span(0, 4, 5)


def test_invalid_utf8_ahead_stops_lexing():
    assert list(make_lexer(b"ab \xff")) == []


def test_read_all_collects_everything():
    tokens = make_lexer("a b c").read_all()
    assert [t.lexeme for t in tokens] == [b"a", b"b", b"c"]


def test_read_all_respects_limit():
    lexer = make_lexer("a b c d")
    tokens = lexer.read_all(2)
    assert [t.lexeme for t in tokens] == [b"a", b"b"]
    assert [t.lexeme for t in lexer] == [b"d"]


def test_read_all_stops_at_error():
    tokens = make_lexer("a b @ c").read_all()
    assert [t.lexeme for t in tokens] == [b"a", b"b"]


def test_eoi_span_after_exhaustion():
    data = b"foo bar  "
    lexer = make_lexer(data, file_id=2)
    assert [t.lexeme for t in lexer] == [b"foo", b"bar"]
    span = lexer.eoi_span()
    assert span == Span.empty(2, 9)
    assert span.start == span.end


def test_eoi_span_at_start():
    assert make_lexer("x").eoi_span() == Span.empty(0, 0)


def test_token_text_round_trip():
    text = "record Point { x : Nat, y : Nat }"
    joined = " ".join(t.text for t in make_lexer(text))
    assert joined == "record Point { x : Nat , y : Nat }"