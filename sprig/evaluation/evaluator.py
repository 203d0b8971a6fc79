"""Core expression evaluator for the Sprig interpreter.

Dispatches on the node class through the expression-form registry. Every
handler returns a value; errors are values too, so no exception crosses this
boundary for a well-formed tree.
"""

from __future__ import annotations

from sprig import Node, SprigValue
from sprig.errors import SprigSyntaxError
from sprig.evaluation.expression_forms import EXPRESSION_FORMS
from sprig.types.environment import Environment


def evaluate(expr: Node, env: Environment) -> SprigValue:
    """Evaluate an expression node in `env` to a value (possibly an Error)."""
    handler = EXPRESSION_FORMS.get(type(expr))
    if handler is None:
        raise SprigSyntaxError(f"Cannot evaluate {type(expr).__name__} as an expression")
    return handler(expr, env, evaluate)
