"""The syntax tree produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from asha.source import Span


class InfixOp(Enum):
    """Binary operators written between their operands."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    GT = ">"
    LEQ = "<="
    GEQ = ">="


@dataclass(frozen=True)
class Literal:
    """A literal value: a natural number (``int``) or a string."""

    value: Union[int, str]

    @property
    def is_nat(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_str(self) -> bool:
        return isinstance(self.value, str)


class BinderKind(Enum):
    """How a binder is bracketed: ``(x : T)``, ``{x : T}`` or ``[x : T]``."""

    EXPLICIT = "explicit"
    IMPLICIT = "implicit"
    INSTANCE = "instance"


@dataclass(frozen=True)
class Binder:
    """A named, typed binder."""

    kind: BinderKind
    span: Span
    name: str
    type_ann: "Expr"


@dataclass(frozen=True)
class Root:
    """The sequence of top-level definitions of a file."""

    definitions: tuple["Expr", ...]

    @property
    def span(self) -> Span:
        return Span(0, 0, 0)


@dataclass(frozen=True)
class Def:
    name: str
    binders: tuple[Binder, ...]
    return_type: "Expr"
    body: "Expr"
    span: Span


@dataclass(frozen=True)
class Var:
    namespace: tuple[str, ...]
    member: str
    span: Span


@dataclass(frozen=True)
class Constructor:
    namespace: tuple[str, ...]
    name: str
    span: Span


@dataclass(frozen=True)
class App:
    fun: "Expr"
    arg: "Expr"
    span: Span


@dataclass(frozen=True)
class Lambda:
    binders: tuple[Binder, ...]
    body: "Expr"
    span: Span


@dataclass(frozen=True)
class Let:
    name: str
    type_ann: Optional["Expr"]
    value: "Expr"
    body: "Expr"
    span: Span


@dataclass(frozen=True)
class Lit:
    value: Literal
    span: Span


@dataclass(frozen=True)
class Tuple:
    elements: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class Proj:
    value: "Expr"
    field: str
    span: Span


@dataclass(frozen=True)
class Hole:
    span: Span


@dataclass(frozen=True)
class Unit:
    span: Span


@dataclass(frozen=True)
class Arrow:
    param_type: "Expr"
    return_type: "Expr"
    span: Span


@dataclass(frozen=True)
class Array:
    elements: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class Pi:
    binder: Binder
    codomain: "Expr"
    span: Span


@dataclass(frozen=True)
class Sigma:
    binder: Binder
    codomain: "Expr"
    span: Span


@dataclass(frozen=True)
class Eval:
    expr: "Expr"
    span: Span


@dataclass(frozen=True)
class Class:
    name: str
    binders: tuple[Binder, ...]
    members: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class Instance:
    name: str
    binders: tuple[Binder, ...]
    type_ann: "Expr"
    members: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class Record:
    name: str
    binders: tuple[Binder, ...]
    fields: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class RecordField:
    name: str
    type_ann: "Expr"
    span: Span


@dataclass(frozen=True)
class RecordLiteral:
    fields: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class RecordLiteralField:
    name: str
    value: "Expr"
    span: Span


@dataclass(frozen=True)
class Extern:
    name: str
    type_ann: "Expr"
    span: Span


@dataclass(frozen=True)
class Inductive:
    name: str
    binders: tuple[Binder, ...]
    constructors: tuple["Expr", ...]
    span: Span


@dataclass(frozen=True)
class InductiveConstructor:
    name: str
    binders: tuple[Binder, ...]
    type_ann: Optional["Expr"]
    span: Span


@dataclass(frozen=True)
class InfixExpr:
    op: InfixOp
    lhs: "Expr"
    rhs: "Expr"
    span: Span


Expr = Union[
    Root,
    Def,
    Var,
    Constructor,
    App,
    Lambda,
    Let,
    Lit,
    Tuple,
    Proj,
    Hole,
    Unit,
    Arrow,
    Array,
    Pi,
    Sigma,
    Eval,
    Class,
    Instance,
    Record,
    RecordField,
    RecordLiteral,
    RecordLiteralField,
    Extern,
    Inductive,
    InductiveConstructor,
    InfixExpr,
]