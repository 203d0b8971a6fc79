"""Runtime values for Sprig.

Evaluation produces exactly one of: Number, Boolean, Void, Closure (see
sprig.types.closure) or Error. Values are immutable; a variable binding is
replaced wholesale on assignment, never edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Wrap an integer into the signed 64-bit range (two's complement)."""
    return ((n - INT64_MIN) % (1 << 64)) + INT64_MIN


@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)


class VoidType:
    """Result of an assignment, or of a function body that never returns."""

    __slots__ = ()

    def __repr__(self):
        return "Void"

    def __str__(self):
        return "void"

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()


class ErrorKind(Enum):
    UNBOUND_IDENTIFIER = "unbound identifier"
    NOT_A_FUNCTION = "not a function"
    INVALID_OPERAND_TYPE = "invalid operand type"
    DIVIDE_BY_ZERO = "divide by zero"
    NOT_A_WHOLE_NUMBER = "not a whole number"
    ARITY_MISMATCH = "wrong number of arguments"
    RECURSION_LIMIT = "maximum recursion depth exceeded"


@dataclass(frozen=True)
class Error:
    """An evaluation failure. Propagates unchanged to the top of the program."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


def error(kind: ErrorKind, message: str | None = None) -> Error:
    """Build an Error, defaulting the message to the kind's description."""
    return Error(kind, message if message is not None else kind.value)
