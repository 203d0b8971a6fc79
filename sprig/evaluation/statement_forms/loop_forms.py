"""Looping statements for Sprig: while and for.

Each loop is implemented as a small evaluator object that closes over the loop
parts and reuses the block executor to run the body in a fresh scope on every
iteration.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sprig import EvaluatorFn, ExecutorFn, Node, SprigValue
from sprig.evaluation.statement_forms.declaration_form import declaration_form
from sprig.syntax.nodes import ForStatement, VariableDeclaration, WhileStatement
from sprig.types.environment import Environment
from sprig.types.values import Boolean, Error, ErrorKind, error

logger = logging.getLogger(__name__)


class LoopEval:
    """Implements the test / body / update cycle shared by while and for.

    test:   expression that must yield a Boolean; None means always true
    update: expression evaluated after each completed body; may be None
    body:   statements executed each iteration in a child of the loop scope
    """

    def __init__(
        self,
        test: Node | None,
        update: Node | None,
        body: Sequence[Node],
        evaluate_fn: EvaluatorFn,
        execute_fn: ExecutorFn,
    ):
        self.test: Node | None = test
        self.update: Node | None = update
        self.body: Sequence[Node] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn
        self.execute_fn: ExecutorFn = execute_fn

    def eval(self, loop_env: Environment) -> SprigValue | None:
        """Run until the test is false.

        Returns None when the loop simply ends; a return value or an Error
        from the body (or from test/update) is returned so the enclosing
        block stops with it.
        """
        iterations = 0
        while True:
            if self.test is not None:
                test = self.evaluate_fn(self.test, loop_env)
                if isinstance(test, Error):
                    return test
                if not isinstance(test, Boolean):
                    return error(ErrorKind.INVALID_OPERAND_TYPE, "invalid loop test type")
                if not test.value:
                    logger.debug("loop finished after %d iteration(s)", iterations)
                    return None

            result = self.execute_fn(self.body, Environment(outer=loop_env))
            if result is not None:
                return result

            if self.update is not None:
                updated = self.evaluate_fn(self.update, loop_env)
                if isinstance(updated, Error):
                    return updated
            iterations += 1


def while_loop_form(
    node: WhileStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    execute_fn: ExecutorFn,
) -> SprigValue | None:
    loop_env = Environment(outer=env)
    return LoopEval(node.test, None, node.body, evaluate_fn, execute_fn).eval(loop_env)


def for_loop_form(
    node: ForStatement,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    execute_fn: ExecutorFn,
) -> SprigValue | None:
    # Only the loop's own declarations are local to it
    loop_env = Environment(outer=env)

    if isinstance(node.init, VariableDeclaration):
        failed = declaration_form(node.init, loop_env, evaluate_fn, execute_fn)
        if failed is not None:
            return failed
    elif node.init is not None:
        value = evaluate_fn(node.init, loop_env)
        if isinstance(value, Error):
            return value

    return LoopEval(node.test, node.update, node.body, evaluate_fn, execute_fn).eval(loop_env)
