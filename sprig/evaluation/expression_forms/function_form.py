from sprig import EvaluatorFn, SprigValue
from sprig.syntax.nodes import FunctionExpression
from sprig.types.closure import Closure
from sprig.types.environment import Environment


def function_form(
    node: FunctionExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SprigValue:
    # The body is not evaluated here; `env` becomes the defining scope.
    return Closure(node.params, node.body, env)
