from sprig.types.environment import Environment
from sprig.types.closure import Closure
from sprig.types.values import (
    Number,
    Boolean,
    TRUE,
    FALSE,
    Void,
    VoidType,
    Error,
    ErrorKind,
    error,
)

__all__ = [
    "Environment",
    "Closure",
    "Number",
    "Boolean",
    "TRUE",
    "FALSE",
    "Void",
    "VoidType",
    "Error",
    "ErrorKind",
    "error",
]
