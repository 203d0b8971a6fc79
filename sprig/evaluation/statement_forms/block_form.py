from __future__ import annotations

from sprig import EvaluatorFn, ExecutorFn, SprigValue
from sprig.syntax.nodes import BlockStatement
from sprig.types.environment import Environment


def block_form(
    node: BlockStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    execute_fn: ExecutorFn,
) -> SprigValue | None:
    return execute_fn(node.body, Environment(outer=env))
