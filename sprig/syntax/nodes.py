"""Syntax tree nodes for Sprig programs.

The tree mirrors the subset of ESTree that Sprig evaluates. Nodes are frozen
and hold no evaluation state, so one tree can be evaluated any number of
times. Sequences are tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


# --- Expressions ---

@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Literal:
    raw: Optional[str]


@dataclass(frozen=True)
class BinaryExpression:
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryExpression:
    operator: str
    argument: Expression


@dataclass(frozen=True)
class LogicalExpression:
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class ConditionalExpression:
    test: Expression
    consequent: Expression
    alternate: Expression


@dataclass(frozen=True)
class FunctionExpression:
    params: tuple[str, ...]
    body: tuple[Statement, ...]


@dataclass(frozen=True)
class CallExpression:
    callee: Expression
    arguments: tuple[Expression, ...]


@dataclass(frozen=True)
class AssignmentExpression:
    target: str
    value: Expression


Expression = Union[
    Identifier,
    Literal,
    BinaryExpression,
    UnaryExpression,
    LogicalExpression,
    ConditionalExpression,
    FunctionExpression,
    CallExpression,
    AssignmentExpression,
]


# --- Statements ---

@dataclass(frozen=True)
class VariableDeclarator:
    name: str
    init: Optional[Expression]


@dataclass(frozen=True)
class VariableDeclaration:
    declarations: tuple[VariableDeclarator, ...]


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True)
class ReturnStatement:
    argument: Optional[Expression]


@dataclass(frozen=True)
class BlockStatement:
    body: tuple[Statement, ...]


@dataclass(frozen=True)
class WhileStatement:
    test: Optional[Expression]
    body: tuple[Statement, ...]


@dataclass(frozen=True)
class ForStatement:
    # init is a VariableDeclaration or an expression
    init: Optional[Union[VariableDeclaration, Expression]]
    test: Optional[Expression]
    update: Optional[Expression]
    body: tuple[Statement, ...]


Statement = Union[
    VariableDeclaration,
    ExpressionStatement,
    ReturnStatement,
    BlockStatement,
    WhileStatement,
    ForStatement,
]


@dataclass(frozen=True)
class Program:
    body: tuple[Statement, ...]


BINARY_OPERATORS = frozenset({"+", "-", "*", "/", "==", "<", ">", "<=", ">="})
UNARY_OPERATORS = frozenset({"!", "-"})
LOGICAL_OPERATORS = frozenset({"&&", "||"})
ASSIGNMENT_OPERATORS = frozenset({"="})
