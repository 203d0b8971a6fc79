from sprig import EvaluatorFn, SprigValue
from sprig.syntax.nodes import LogicalExpression, UnaryExpression
from sprig.types.environment import Environment
from sprig.types.values import Boolean, Error, ErrorKind, Number, error, wrap_int64


def unary_form(node: UnaryExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    """Logical not (`!`) on a Boolean, or negation (`-`) of a Number."""
    arg = evaluate_fn(node.argument, env)
    if isinstance(arg, Error):
        return arg

    if node.operator == "-":
        if not isinstance(arg, Number):
            return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid unary type")
        return Number(wrap_int64(-arg.value))

    if not isinstance(arg, Boolean):
        return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid unary type")
    return Boolean(not arg.value)


def logical_form(node: LogicalExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    """Logical AND / OR.

    Not short-circuiting: the right operand is always evaluated (unless the
    left one failed), exactly like the operands of a binary expression. Both
    operands must be Booleans.
    """
    left = evaluate_fn(node.left, env)
    if isinstance(left, Error):
        return left
    right = evaluate_fn(node.right, env)
    if isinstance(right, Error):
        return right

    if not (isinstance(left, Boolean) and isinstance(right, Boolean)):
        return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid logical type(s)")

    if node.operator == "&&":
        return Boolean(left.value and right.value)
    return Boolean(left.value or right.value)
