"""Closure representation and argument binding for Sprig."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from sprig import Node, SprigValue
from sprig.types.environment import Environment
from sprig.errors import SprigArityError


class Closure:
    """A first-class function with parameters, body, and captured defining scope."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self, params: Sequence[str], body: Sequence[Node], env: Environment | None = None
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[Node, ...] = tuple(body)
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("function (")
            buffer.write(", ".join(self.params))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        # never print the captured scope: it may hold this very closure
        return f"<Closure {self}>"

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: Sequence[SprigValue]) -> Environment:
        """
        Bind the given argument values positionally to this closure's
        parameters and return the new parameter Environment, chained to the
        captured defining scope.

        Raises SprigArityError if the argument count does not match.
        """
        if len(args) != self.arity:
            raise SprigArityError(
                f"Expected {self.arity} argument(s), got {len(args)}"
            )
        param_env = Environment(outer=self.env)
        param_env.update(dict(zip(self.params, args)))
        return param_env
