"""Statement sequencing for Sprig.

execute_block runs statements in order against one scope and decides what
the block yields:

- a value, when a `return` was reached or any statement produced an Error;
  the enclosing block stops too and passes it on;
- otherwise None, except in the program scope (no outer), where the value of
  the last top-level expression statement is the program's result.
"""

from __future__ import annotations

from typing import Sequence

from sprig import Node, SprigValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.evaluator import evaluate
from sprig.evaluation.statement_forms import STATEMENT_FORMS
from sprig.syntax.nodes import ExpressionStatement
from sprig.types.environment import Environment
from sprig.types.values import Error


def execute_block(statements: Sequence[Node], env: Environment) -> SprigValue | None:
    is_program = env.outer is None
    completion: SprigValue | None = None

    for statement in statements:
        if isinstance(statement, ExpressionStatement):
            value = evaluate(statement.expression, env)
            if isinstance(value, Error):
                return value
            if is_program:
                completion = value
            continue

        handler = STATEMENT_FORMS.get(type(statement))
        if handler is None:
            raise SprigSyntaxError(f"Cannot execute {type(statement).__name__} as a statement")
        result = handler(statement, env, evaluate, execute_block)
        if result is not None:
            return result

    return completion
