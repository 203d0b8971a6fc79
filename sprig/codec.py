"""Canonical descriptor encoding for Sprig values.

Every evaluation result has exactly one textual form:

    (value (number 42))
    (value (boolean true))
    (value (void))
    (value (function))
    (error "divide by zero")

Evaluation itself works on typed values; descriptors are produced only at the
output boundary, and decoded only where text has to be read back in.
"""

from __future__ import annotations

import re

from sprig import SprigValue
from sprig.errors import SprigTypeError
from sprig.types.closure import Closure
from sprig.types.values import (
    INT64_MAX,
    INT64_MIN,
    Boolean,
    Error,
    ErrorKind,
    Number,
    VoidType,
    Void,
    FALSE,
    TRUE,
    error,
)

_NUMBER_RE = re.compile(r"\(value \(number (-?[0-9]+)\)\)")
_BOOLEAN_RE = re.compile(r"\(value \(boolean (true|false)\)\)")
_ERROR_RE = re.compile(r'\(error "(.*)"\)', re.DOTALL)
_VOID = "(value (void))"
_FUNCTION = "(value (function))"
_ERROR_PREFIX = '(error "'

_WHOLE_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def encode(value: SprigValue) -> str:
    """Return the descriptor for `value`."""
    if isinstance(value, Error):
        return f'{_ERROR_PREFIX}{value.message}")'
    if isinstance(value, Number):
        return f"(value (number {value.value}))"
    if isinstance(value, Boolean):
        return f"(value (boolean {value}))"
    if isinstance(value, VoidType):
        return _VOID
    if isinstance(value, Closure):
        return _FUNCTION
    raise SprigTypeError(f"Cannot encode non-value {value!r}")


def is_error(descriptor: str) -> bool:
    return descriptor.startswith(_ERROR_PREFIX)


def decode_number(descriptor: str) -> int:
    """Extract the integer from a number descriptor.

    Raises SprigTypeError for any other descriptor.
    """
    match = _NUMBER_RE.fullmatch(descriptor)
    if match is None:
        raise SprigTypeError(f"Expected a number descriptor, got {descriptor!r}")
    return int(match.group(1))


def decode_boolean(descriptor: str) -> bool:
    """Extract the truth value from a boolean descriptor.

    Raises SprigTypeError for any other descriptor.
    """
    match = _BOOLEAN_RE.fullmatch(descriptor)
    if match is None:
        raise SprigTypeError(f"Expected a boolean descriptor, got {descriptor!r}")
    return match.group(1) == "true"


def decode(descriptor: str) -> SprigValue:
    """Read a descriptor back into a value.

    Closures are opaque at the descriptor level, so the function form cannot
    be decoded. Error kinds are recovered from the message when it is one of
    the standard ones.
    """
    if descriptor == _VOID:
        return Void
    if _NUMBER_RE.fullmatch(descriptor):
        return Number(decode_number(descriptor))
    if _BOOLEAN_RE.fullmatch(descriptor):
        return TRUE if decode_boolean(descriptor) else FALSE
    match = _ERROR_RE.fullmatch(descriptor)
    if match is not None:
        message = match.group(1)
        for kind in ErrorKind:
            if kind.value == message:
                return error(kind)
        return Error(ErrorKind.INVALID_OPERAND_TYPE, message)
    raise SprigTypeError(f"Cannot decode descriptor {descriptor!r}")


def parse_literal(raw: str | None) -> SprigValue:
    """Decode the raw text of a literal into a Number or Boolean.

    Anything that is not `true`, `false` or a whole number fitting in 64 bits
    yields the `not a whole number` error.
    """
    if raw == "true":
        return TRUE
    if raw == "false":
        return FALSE
    if raw is not None and _WHOLE_NUMBER_RE.fullmatch(raw):
        n = int(raw)
        if INT64_MIN <= n <= INT64_MAX:
            return Number(n)
    return error(ErrorKind.NOT_A_WHOLE_NUMBER)
