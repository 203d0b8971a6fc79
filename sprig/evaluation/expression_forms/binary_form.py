"""Arithmetic and relational operators on 64-bit integers."""

from __future__ import annotations

import operator

from sprig import EvaluatorFn, SprigValue
from sprig.syntax.nodes import BinaryExpression
from sprig.types.environment import Environment
from sprig.types.values import Boolean, Error, ErrorKind, Number, error, wrap_int64


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // rounds down)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


ARITHMETIC_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

RELATIONAL_OPS = {
    "==": operator.eq,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def binary_form(node: BinaryExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    left = evaluate_fn(node.left, env)
    if isinstance(left, Error):
        return left
    right = evaluate_fn(node.right, env)
    if isinstance(right, Error):
        return right

    if not (isinstance(left, Number) and isinstance(right, Number)):
        return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid binary type(s)")

    if node.operator in RELATIONAL_OPS:
        return Boolean(RELATIONAL_OPS[node.operator](left.value, right.value))

    if node.operator == "/" and right.value == 0:
        return error(ErrorKind.DIVIDE_BY_ZERO)
    return Number(wrap_int64(ARITHMETIC_OPS[node.operator](left.value, right.value)))
