from sprig import EvaluatorFn, SprigValue
from sprig.syntax.nodes import AssignmentExpression
from sprig.types.environment import Environment
from sprig.types.values import Error, ErrorKind, Void, error


def assignment_form(
    node: AssignmentExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SprigValue:
    # Assignment never creates a binding; check before running the right side.
    if not env.is_bound(node.target):
        return error(ErrorKind.UNBOUND_IDENTIFIER)

    value = evaluate_fn(node.value, env)
    if isinstance(value, Error):
        return value
    env.set(node.target, value)

    return Void
