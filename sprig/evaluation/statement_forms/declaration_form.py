from __future__ import annotations

from sprig import EvaluatorFn, ExecutorFn, SprigValue
from sprig.syntax.nodes import FunctionExpression, VariableDeclaration
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.values import Error, Void


def declaration_form(
    node: VariableDeclaration,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    execute_fn: ExecutorFn,
) -> SprigValue | None:
    """
    var a = 1, f = function (n) { ... };
    Each declarator binds in `env` itself, replacing any earlier binding of the
    same name there. The first failing initializer aborts the whole block.
    """
    for declarator in node.declarations:
        init = declarator.init
        if init is None:
            value = Void
        elif isinstance(init, FunctionExpression):
            value = Closure(init.params, init.body, env)
        else:
            value = evaluate_fn(init, env)
            if isinstance(value, Error):
                return value
        env.define(declarator.name, value)
    return None
