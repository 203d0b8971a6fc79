"""Program-level entry point for Sprig."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

from sprig import SprigValue, config
from sprig.codec import encode
from sprig.evaluation.block import execute_block
from sprig.reader.estree import loads, read_program
from sprig.syntax.nodes import Program
from sprig.types.environment import Environment
from sprig.types.values import ErrorKind, Void, error

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates whole programs and renders their result as a descriptor.
    Every run starts from a fresh top-level scope, so evaluating the same
    program twice gives the same answer.

    Each Sprig call costs several Python frames, so programs run on a
    dedicated thread with a large stack and a raised recursion limit
    (SPRIG_STACK_SIZE, SPRIG_RECURSION_LIMIT). Both are restored afterwards.
    """

    def run(self, program: Program) -> SprigValue:
        """Evaluate a Program node and return its final value.

        Raises ValueError if the recursion limit or stack size is misconfigured.
        """
        limit = config.get_recursion_limit()
        stack_size = config.get_stack_size()

        outcome: dict[str, Any] = {}

        def _target():
            try:
                outcome["value"] = self._execute(program)
            except BaseException as exc:  # re-raised on the calling thread
                outcome["exc"] = exc

        previous_limit = sys.getrecursionlimit()
        previous_stack = threading.stack_size(stack_size)
        sys.setrecursionlimit(max(limit, previous_limit))
        try:
            worker = threading.Thread(target=_target, name="sprig-eval")
            worker.start()
            worker.join()
        finally:
            threading.stack_size(previous_stack)
            sys.setrecursionlimit(previous_limit)

        if "exc" in outcome:
            raise outcome["exc"]
        return outcome["value"]

    def _execute(self, program: Program) -> SprigValue:
        env = Environment()
        logger.debug("running program with %d top-level statement(s)", len(program.body))
        try:
            result = execute_block(program.body, env)
        except RecursionError:
            logger.warning("recursion limit reached while evaluating program")
            return error(ErrorKind.RECURSION_LIMIT)
        return Void if result is None else result

    def eval(self, source: str | dict[str, Any]) -> str:
        """Read ESTree JSON (text or an already-parsed dict), run it, return the descriptor.

        Raises SprigSyntaxError if the input is not a readable program.
        """
        program = loads(source) if isinstance(source, str) else read_program(source)
        descriptor = encode(self.run(program))
        logger.debug("program result: %s", descriptor)
        return descriptor
