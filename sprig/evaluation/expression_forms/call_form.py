from sprig import EvaluatorFn, SprigValue
from sprig.evaluation.apply import apply
from sprig.syntax.nodes import CallExpression
from sprig.types.environment import Environment
from sprig.types.values import Error


def call_form(node: CallExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    """
    Arguments are evaluated left to right before the callee is resolved; the
    first error wins. The callee is any expression: a name, an immediately
    invoked function expression, or a call that returns a closure.
    """
    args = []
    for arg in node.arguments:
        value = evaluate_fn(arg, env)
        if isinstance(value, Error):
            return value
        args.append(value)

    fn = evaluate_fn(node.callee, env)
    if isinstance(fn, Error):
        return fn
    return apply(fn, args)
