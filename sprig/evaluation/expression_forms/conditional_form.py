from sprig import EvaluatorFn, SprigValue
from sprig.syntax.nodes import ConditionalExpression
from sprig.types.environment import Environment
from sprig.types.values import Boolean, Error, ErrorKind, error


def conditional_form(
    node: ConditionalExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SprigValue:
    test = evaluate_fn(node.test, env)
    if isinstance(test, Error):
        return test
    # No truthiness: the test must be an actual Boolean
    if not isinstance(test, Boolean):
        return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid conditional type(s)")

    if test.value:
        return evaluate_fn(node.consequent, env)
    return evaluate_fn(node.alternate, env)
