from __future__ import annotations
import logging
import os


_TRUTHY = {'1', 'true', 'yes', 'on'}

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 100000
# evaluation thread stack, in bytes
_DEFAULT_STACK_SIZE = 512 * 1024 * 1024


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_log_level() -> str:
    level = str_from_env('SPRIG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"SPRIG_LOG_LEVEL must be a logging level name, got {level!r}")
    return level


def get_recursion_limit() -> int:
    # never lower the interpreter's own limit
    return max(int_from_env('SPRIG_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)


def is_strict_input() -> bool:
    """When set, the CLI refuses input that is not valid JSON from the first byte."""
    return flag_from_env('SPRIG_STRICT_INPUT')


def get_stack_size() -> int:
    """Stack size in bytes for the thread that evaluates programs."""
    return int_from_env('SPRIG_STACK_SIZE', _DEFAULT_STACK_SIZE)
