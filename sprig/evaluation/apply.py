"""Application engine for Sprig.

Centralizes closure invocation for the interpreter: argument binding in a
parameter scope chained to the captured defining scope, a separate body
scope for the function's own declarations, and execution of the body
through the block executor.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sprig import SprigValue
from sprig.errors import SprigArityError
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.values import ErrorKind, Void, error

logger = logging.getLogger(__name__)


def invoke(fn: Closure, args: Sequence[SprigValue]) -> SprigValue:
    """Invoke a closure with already-evaluated arguments.

    Behavior:
    - Parameters are bound positionally in a new scope whose outer is the
      closure's captured scope, so they are visible to the body and to any
      function created inside it, but never leak into the defining scope.
    - The body runs in a further child scope.
    - A body that finishes without `return` yields Void.
    - A wrong argument count yields the arity-mismatch error.
    """
    # Block execution recurses back into calls; import lazily to break the cycle.
    from sprig.evaluation.block import execute_block

    try:
        param_env = fn.extend_env(args)
    except SprigArityError as exc:
        logger.debug("arity mismatch calling %s: %s", fn, exc)
        return error(ErrorKind.ARITY_MISMATCH)

    logger.debug("invoking %s with %r", fn, list(args))
    body_env = Environment(outer=param_env)
    result = execute_block(fn.body, body_env)
    return Void if result is None else result


def apply(head: SprigValue, args: Sequence[SprigValue]) -> SprigValue:
    """Apply a callee value to arguments.

    Only closures can be applied; anything else yields `not a function`.
    """
    if isinstance(head, Closure):
        return invoke(head, args)
    return error(ErrorKind.NOT_A_FUNCTION)
