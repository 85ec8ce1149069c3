"""Syntax tree nodes for expressions, statements and modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from jsl.tokens import SourcePosition


class BinaryOperation(Enum):
    """Operators that take two operands."""

    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    GREATER = auto()
    LESS = auto()
    GREATER_EQUAL = auto()
    LESS_EQUAL = auto()
    LOGICAL_AND = auto()
    LOGICAL_OR = auto()


class UnaryOperation(Enum):
    """Operators that take one operand."""

    NEGATE = auto()
    NOT = auto()


@dataclass(frozen=True)
class ASTNode:
    """Base of every node: where in the source it comes from."""

    position: SourcePosition


@dataclass(frozen=True)
class BinaryExpr(ASTNode):
    """``left op right``."""

    left: Expr
    op: BinaryOperation
    right: Expr


@dataclass(frozen=True)
class UnaryExpr(ASTNode):
    """``op expr``."""

    op: UnaryOperation
    expr: Expr


@dataclass(frozen=True)
class IntegerLiteralExpr(ASTNode):
    """An integer literal."""

    number: int


Expr = Union[BinaryExpr, UnaryExpr, IntegerLiteralExpr]


@dataclass(frozen=True)
class ExprStmt(ASTNode):
    """An expression evaluated for its effect; its value is discarded."""

    expr: Expr


@dataclass(frozen=True)
class PrintStmt(ASTNode):
    """``print expr;``."""

    expr: Expr


Stmt = Union[ExprStmt, PrintStmt]


@dataclass
class ModuleAST:
    """The statements of one source file."""

    file_path: str | None
    stmts: list[Stmt] = field(default_factory=list)