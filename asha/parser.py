"""Building the syntax tree from a token stream.

The grammar is parsed as a parsing expression grammar: alternatives are
tried in order, repetition is greedy and never gives back what it matched.
When the tokens do not form a program, one error is reported at the
furthest position any rule reached, listing the token kinds that were
expected there.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Union

from asha.errors import ParseError, ParseErrorKind
from asha.source import Span, spanning
from asha.tokens import Token, TokenKind
from asha.tree import (
    App,
    Array,
    Arrow,
    Binder,
    BinderKind,
    Class,
    Constructor,
    Def,
    Eval,
    Expr,
    Extern,
    Hole,
    Inductive,
    InductiveConstructor,
    InfixExpr,
    InfixOp,
    Instance,
    Lambda,
    Let,
    Lit,
    Literal,
    Pi,
    Proj,
    Record,
    RecordField,
    Root,
    Sigma,
    Tuple,
    Unit,
    Var,
)

_U64_MAX = 2**64 - 1

_BINDER_BRACKETS = (
    (TokenKind.LPAREN, TokenKind.RPAREN, BinderKind.EXPLICIT),
    (TokenKind.LBRACE, TokenKind.RBRACE, BinderKind.IMPLICIT),
    (TokenKind.LBRACKET, TokenKind.RBRACKET, BinderKind.INSTANCE),
)

_MUL_OPS = {TokenKind.STAR: InfixOp.MUL, TokenKind.SLASH: InfixOp.DIV}
_ADD_OPS = {TokenKind.PLUS: InfixOp.ADD, TokenKind.MINUS: InfixOp.SUB}
_CMP_OPS = {
    TokenKind.EQUAL_EQUAL: InfixOp.EQ,
    TokenKind.BANG_EQUAL: InfixOp.NEQ,
    TokenKind.LESS_EQUAL: InfixOp.LEQ,
    TokenKind.GREATER_EQUAL: InfixOp.GEQ,
    TokenKind.LESS: InfixOp.LT,
    TokenKind.GREATER: InfixOp.GT,
}

_FAILED = object()


class _Backtrack(Exception):
    """A rule did not match at the position it was tried."""


_Rule = Callable[[int], tuple]


class _Parser:
    def __init__(self, tokens: list[tuple[Token, Span]], eoi_span: Span):
        self._tokens = tokens
        self._eoi = eoi_span
        self._furthest = -1
        self._expected: list[TokenKind] = []
        self._memo: dict[int, object] = {}

    # -- primitives -------------------------------------------------------

    def _note(self, pos: int, kind: Optional[TokenKind]) -> None:
        if pos > self._furthest:
            self._furthest = pos
            self._expected = []
        if pos == self._furthest and kind is not None and kind not in self._expected:
            self._expected.append(kind)

    def _expect_any(self, pos: int, kinds: Iterable[TokenKind]) -> tuple[Token, int]:
        current = self._tokens[pos][0] if pos < len(self._tokens) else None
        for kind in kinds:
            if current is not None and current.kind is kind:
                return current, pos + 1
            self._note(pos, kind)
        raise _Backtrack

    def _expect(self, pos: int, kind: TokenKind) -> tuple[Token, int]:
        return self._expect_any(pos, (kind,))

    def _choice(self, pos: int, alternatives: Sequence[_Rule]) -> tuple:
        for rule in alternatives:
            try:
                return rule(pos)
            except _Backtrack:
                continue
        raise _Backtrack

    def _many(self, rule: _Rule, pos: int) -> tuple[list, int]:
        items = []
        while True:
            try:
                item, pos = rule(pos)
            except _Backtrack:
                return items, pos
            items.append(item)

    def _separated(self, rule: _Rule, pos: int) -> tuple[list, int]:
        try:
            first, pos = rule(pos)
        except _Backtrack:
            return [], pos
        items = [first]
        while True:
            try:
                _, after_sep = self._expect(pos, TokenKind.COMMA)
                item, after_item = rule(after_sep)
            except _Backtrack:
                return items, pos
            items.append(item)
            pos = after_item

    def _skip_optional(self, pos: int, kind: TokenKind) -> int:
        try:
            _, pos = self._expect(pos, kind)
        except _Backtrack:
            pass
        return pos

    # -- program ----------------------------------------------------------

    def run(self) -> tuple[Optional[Root], list[ParseError]]:
        definitions = []
        pos = 0
        alternatives = (
            self._def,
            self._eval,
            self._record,
            self._extern,
            self._inductive,
            self._class,
            self._instance,
        )
        while True:
            try:
                definition, pos = self._choice(pos, alternatives)
            except _Backtrack:
                break
            definitions.append(definition)
        if pos == len(self._tokens):
            return Root(tuple(definitions)), []
        self._note(pos, None)
        return None, [self._error()]

    def _error(self) -> ParseError:
        pos = self._furthest
        if pos < len(self._tokens):
            token, span = self._tokens[pos]
            return ParseError(
                ParseErrorKind.UNEXPECTED_TOKEN, span, self._expected, token.kind
            )
        return ParseError(
            ParseErrorKind.UNEXPECTED_END_OF_INPUT, self._eoi, self._expected, None
        )

    # -- definitions ------------------------------------------------------

    def _def(self, pos: int) -> tuple[Def, int]:
        _, pos = self._expect(pos, TokenKind.DEF)
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        binders, pos = self._many(self._binder, pos)
        _, pos = self._expect(pos, TokenKind.COLON)
        return_type, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.EQUAL)
        body, pos = self._expr(pos)
        return (
            Def(name.text, tuple(binders), return_type, body, spanning(name, body)),
            pos,
        )

    def _eval(self, pos: int) -> tuple[Eval, int]:
        keyword, pos = self._expect(pos, TokenKind.EVAL)
        expr, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.SEMICOLON)
        return Eval(expr, spanning(keyword, expr)), pos

    def _extern(self, pos: int) -> tuple[Extern, int]:
        keyword, pos = self._expect(pos, TokenKind.EXTERN)
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        _, pos = self._expect(pos, TokenKind.COLON)
        type_ann, pos = self._expr(pos)
        return Extern(name.text, type_ann, spanning(keyword, type_ann)), pos

    def _braced(self, pos: int, body: _Rule) -> tuple[list, list, Token, int]:
        """Binders, then ``{`` body ``,``? ``}``."""
        binders, pos = self._many(self._binder, pos)
        _, pos = self._expect(pos, TokenKind.LBRACE)
        items, pos = body(pos)
        pos = self._skip_optional(pos, TokenKind.COMMA)
        rbrace, pos = self._expect(pos, TokenKind.RBRACE)
        return binders, items, rbrace, pos

    def _record(self, pos: int) -> tuple[Record, int]:
        keyword, pos = self._expect(pos, TokenKind.RECORD)
        name, pos = self._expect(pos, TokenKind.UPPER_IDENTIFIER)
        binders, fields, rbrace, pos = self._braced(pos, self._fields)
        return (
            Record(name.text, tuple(binders), tuple(fields), spanning(keyword, rbrace)),
            pos,
        )

    def _class(self, pos: int) -> tuple[Class, int]:
        keyword, pos = self._expect(pos, TokenKind.CLASS)
        name, pos = self._expect(pos, TokenKind.UPPER_IDENTIFIER)
        binders, members, rbrace, pos = self._braced(pos, self._fields)
        return (
            Class(name.text, tuple(binders), tuple(members), spanning(keyword, rbrace)),
            pos,
        )

    def _instance(self, pos: int) -> tuple[Instance, int]:
        keyword, pos = self._expect(pos, TokenKind.INSTANCE)
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        binders, pos = self._many(self._binder, pos)
        _, pos = self._expect(pos, TokenKind.COLON)
        type_ann, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.LBRACE)
        members, pos = self._fields(pos)
        pos = self._skip_optional(pos, TokenKind.COMMA)
        rbrace, pos = self._expect(pos, TokenKind.RBRACE)
        return (
            Instance(
                name.text,
                tuple(binders),
                type_ann,
                tuple(members),
                spanning(keyword, rbrace),
            ),
            pos,
        )

    def _inductive(self, pos: int) -> tuple[Inductive, int]:
        keyword, pos = self._expect(pos, TokenKind.INDUCTIVE)
        name, pos = self._expect(pos, TokenKind.UPPER_IDENTIFIER)
        binders, constructors, rbrace, pos = self._braced(pos, self._constructors)
        return (
            Inductive(
                name.text, tuple(binders), tuple(constructors), spanning(keyword, rbrace)
            ),
            pos,
        )

    def _fields(self, pos: int) -> tuple[list[RecordField], int]:
        return self._separated(self._field, pos)

    def _field(self, pos: int) -> tuple[RecordField, int]:
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        _, pos = self._expect(pos, TokenKind.COLON)
        type_ann, pos = self._expr(pos)
        return RecordField(name.text, type_ann, spanning(name, type_ann)), pos

    def _constructors(self, pos: int) -> tuple[list[InductiveConstructor], int]:
        return self._separated(self._constructor_decl, pos)

    def _constructor_decl(self, pos: int) -> tuple[InductiveConstructor, int]:
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        binders, pos = self._many(self._binder, pos)
        type_ann: Optional[Expr] = None
        try:
            _, after_colon = self._expect(pos, TokenKind.COLON)
            type_ann, pos = self._expr(after_colon)
        except _Backtrack:
            pass
        return InductiveConstructor(name.text, tuple(binders), type_ann, name.span), pos

    # -- binders ----------------------------------------------------------

    def _binder(self, pos: int) -> tuple[Binder, int]:
        for open_kind, close_kind, binder_kind in _BINDER_BRACKETS:
            try:
                opening, p = self._expect(pos, open_kind)
                name, p = self._expect(p, TokenKind.LOWER_IDENTIFIER)
                _, p = self._expect(p, TokenKind.COLON)
                type_ann, p = self._expr(p)
                closing, p = self._expect(p, close_kind)
            except _Backtrack:
                continue
            return Binder(binder_kind, spanning(opening, closing), name.text, type_ann), p
        raise _Backtrack

    # -- expressions ------------------------------------------------------

    def _expr(self, pos: int) -> tuple:
        cached = self._memo.get(pos)
        if cached is _FAILED:
            raise _Backtrack
        if cached is not None:
            return cached  # type: ignore[return-value]
        try:
            result = self._choice(
                pos,
                (
                    self._lambda,
                    self._let_typed,
                    self._let_untyped,
                    self._pi,
                    self._sigma,
                    self._arrow_or_product,
                ),
            )
        except _Backtrack:
            self._memo[pos] = _FAILED
            raise
        self._memo[pos] = result
        return result

    def _lambda(self, pos: int) -> tuple[Lambda, int]:
        keyword, pos = self._expect(pos, TokenKind.LAMBDA)
        binders, pos = self._many(self._binder, pos)
        if not binders:
            raise _Backtrack
        _, pos = self._expect(pos, TokenKind.FAT_ARROW)
        body, pos = self._expr(pos)
        return Lambda(tuple(binders), body, spanning(keyword, body)), pos

    def _let_typed(self, pos: int) -> tuple[Let, int]:
        keyword, pos = self._expect(pos, TokenKind.LET)
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        _, pos = self._expect(pos, TokenKind.COLON)
        type_ann, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.EQUAL)
        value, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.IN)
        body, pos = self._expr(pos)
        return Let(name.text, type_ann, value, body, spanning(keyword, body)), pos

    def _let_untyped(self, pos: int) -> tuple[Let, int]:
        keyword, pos = self._expect(pos, TokenKind.LET)
        name, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        _, pos = self._expect(pos, TokenKind.EQUAL)
        value, pos = self._expr(pos)
        _, pos = self._expect(pos, TokenKind.IN)
        body, pos = self._expr(pos)
        return Let(name.text, None, value, body, spanning(keyword, body)), pos

    def _pi(self, pos: int) -> tuple[Pi, int]:
        binder, pos = self._binder(pos)
        _, pos = self._expect(pos, TokenKind.ARROW)
        codomain, pos = self._expr(pos)
        return Pi(binder, codomain, spanning(binder, codomain)), pos

    def _sigma(self, pos: int) -> tuple[Sigma, int]:
        binder, pos = self._binder(pos)
        _, pos = self._expect(pos, TokenKind.PRODUCT)
        codomain, pos = self._expr(pos)
        return Sigma(binder, codomain, spanning(binder, codomain)), pos

    def _arrow_or_product(self, pos: int) -> tuple:
        lhs, pos = self._cmp(pos)
        try:
            operator, after_op = self._expect_any(pos, (TokenKind.ARROW, TokenKind.PRODUCT))
            rhs, after_rhs = self._expr(after_op)
        except _Backtrack:
            return lhs, pos
        span = spanning(lhs, rhs)
        if operator.kind is TokenKind.ARROW:
            return Arrow(lhs, rhs, span), after_rhs
        binder = Binder(BinderKind.EXPLICIT, lhs.span, "_", lhs)
        return Sigma(binder, rhs, span), after_rhs

    def _cmp(self, pos: int) -> tuple:
        lhs, pos = self._add(pos)
        try:
            operator, after_op = self._expect_any(pos, _CMP_OPS)
            rhs, after_rhs = self._add(after_op)
        except _Backtrack:
            return lhs, pos
        return InfixExpr(_CMP_OPS[operator.kind], lhs, rhs, spanning(lhs, rhs)), after_rhs

    def _left_assoc(self, pos: int, operand: _Rule, operators: dict) -> tuple:
        lhs, pos = operand(pos)
        while True:
            try:
                operator, after_op = self._expect_any(pos, operators)
                rhs, after_rhs = operand(after_op)
            except _Backtrack:
                return lhs, pos
            lhs = InfixExpr(operators[operator.kind], lhs, rhs, spanning(lhs, rhs))
            pos = after_rhs

    def _add(self, pos: int) -> tuple:
        return self._left_assoc(pos, self._mul, _ADD_OPS)

    def _mul(self, pos: int) -> tuple:
        return self._left_assoc(pos, self._app, _MUL_OPS)

    def _app(self, pos: int) -> tuple:
        fun, pos = self._proj(pos)
        while True:
            try:
                arg, after = self._proj(pos)
            except _Backtrack:
                return fun, pos
            fun = App(fun, arg, spanning(fun, arg))
            pos = after

    def _proj(self, pos: int) -> tuple:
        value, pos = self._atom(pos)
        while True:
            try:
                _, after_dot = self._expect(pos, TokenKind.DOT)
                field, after_field = self._expect(after_dot, TokenKind.LOWER_IDENTIFIER)
            except _Backtrack:
                return value, pos
            value = Proj(value, field.text, spanning(value, field))
            pos = after_field

    # -- atoms ------------------------------------------------------------

    def _atom(self, pos: int) -> tuple:
        return self._choice(
            pos,
            (
                self._qualified,
                self._var,
                self._constructor,
                self._number,
                self._string,
                self._hole,
                self._grouped,
                self._array,
            ),
        )

    def _ident(self, pos: int) -> tuple[Token, int]:
        return self._expect_any(
            pos, (TokenKind.LOWER_IDENTIFIER, TokenKind.UPPER_IDENTIFIER)
        )

    def _qualified(self, pos: int) -> tuple:
        first, pos = self._ident(pos)
        rest: list[Token] = []
        while True:
            try:
                _, after_sep = self._expect(pos, TokenKind.DOUBLE_COLON)
                part, after_part = self._ident(after_sep)
            except _Backtrack:
                break
            rest.append(part)
            pos = after_part
        if not rest:
            raise _Backtrack
        last = rest[-1]
        namespace = tuple([first.text] + [token.text for token in rest[:-1]])
        span = spanning(first, last)
        if last.kind is TokenKind.UPPER_IDENTIFIER:
            return Constructor(namespace, last.text, span), pos
        return Var(namespace, last.text, span), pos

    def _var(self, pos: int) -> tuple[Var, int]:
        token, pos = self._expect(pos, TokenKind.LOWER_IDENTIFIER)
        return Var((), token.text, token.span), pos

    def _constructor(self, pos: int) -> tuple[Constructor, int]:
        token, pos = self._expect(pos, TokenKind.UPPER_IDENTIFIER)
        return Constructor((), token.text, token.span), pos

    def _number(self, pos: int) -> tuple[Lit, int]:
        token, pos = self._expect(pos, TokenKind.NUMBER)
        text = token.text
        value = int(text) if text.isdigit() and text.isascii() else 0
        if value > _U64_MAX:
            value = 0
        return Lit(Literal(value), token.span), pos

    def _string(self, pos: int) -> tuple[Lit, int]:
        token, pos = self._expect(pos, TokenKind.STRING)
        text = token.text
        inner = text[1:-1] if len(text) >= 2 else text
        return Lit(Literal(inner), token.span), pos

    def _hole(self, pos: int) -> tuple[Hole, int]:
        token, pos = self._expect(pos, TokenKind.UNDERSCORE)
        return Hole(token.span), pos

    def _grouped(self, pos: int) -> tuple:
        lparen, pos = self._expect(pos, TokenKind.LPAREN)
        items, pos = self._separated(self._expr, pos)
        rparen, pos = self._expect(pos, TokenKind.RPAREN)
        if not items:
            return Unit(spanning(lparen, rparen)), pos
        if len(items) == 1:
            return items[0], pos
        return Tuple(tuple(items), spanning(lparen, rparen)), pos

    def _array(self, pos: int) -> tuple[Array, int]:
        lbracket, pos = self._expect(pos, TokenKind.LBRACKET)
        items, pos = self._separated(self._expr, pos)
        rbracket, pos = self._expect(pos, TokenKind.RBRACKET)
        return Array(tuple(items), spanning(lbracket, rbracket)), pos


def parse(
    tokens: Iterable[Union[Token, tuple[Token, Span]]], eoi_span: Span
) -> tuple[Optional[Root], list[ParseError]]:
    """Parse a whole file's tokens into a :class:`Root`.

    ``tokens`` holds tokens, or pairs of a token and the span to report it
    at. On success the result is ``(root, [])``; otherwise ``(None, errors)``
    with the error placed at the furthest point the grammar reached, or at
    ``eoi_span`` when the input ran out.
    """
    pairs = [
        item if isinstance(item, tuple) else (item, item.span) for item in tokens
    ]
    return _Parser(pairs, eoi_span).run()