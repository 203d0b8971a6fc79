from sprig import EvaluatorFn, ExecutorFn, SprigValue
from sprig.syntax.nodes import ReturnStatement
from sprig.types.environment import Environment
from sprig.types.values import Void


def return_form(
    node: ReturnStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    execute_fn: ExecutorFn,
) -> SprigValue:
    if node.argument is None:
        return Void
    return evaluate_fn(node.argument, env)
