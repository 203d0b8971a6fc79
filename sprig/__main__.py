"""
Command-line runner for Sprig programs.

Usage:
    python -m sprig '{"type": "Program", "body": [...]}'
    python -m sprig --file program.json
    cat program.json | python -m sprig

Prints exactly one line: the descriptor of the program's final value, e.g.
`(value (number 3))` or `(error "divide by zero")`.

Environment:
    SPRIG_LOG_LEVEL        logging level for diagnostics on stderr (default WARNING)
    SPRIG_RECURSION_LIMIT  Python recursion limit used while evaluating (default 100000)
    SPRIG_STACK_SIZE       stack size in bytes of the evaluation thread (default 512 MiB)
    SPRIG_STRICT_INPUT     if set, do not skip leading noise before the JSON text
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from sprig import config
from sprig.errors import SprigSyntaxError
from sprig.interpreter import Interpreter

logger = logging.getLogger("sprig")


def recover_json(text: str) -> str:
    """Drop leading characters until the remainder parses as JSON.

    Input piped from some shells arrives with a byte-order mark or other
    encoding debris in front of the object. Raises SprigSyntaxError if no
    suffix of the text is valid JSON.
    """
    for start in range(len(text)):
        candidate = text[start:]
        try:
            json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if start:
            logger.warning("skipped %d leading character(s) before valid JSON", start)
        return candidate
    raise SprigSyntaxError("no valid JSON found in input")


def _error_line(prefix: str, exc: Exception) -> str:
    # the message sits inside a double-quoted descriptor
    message = str(exc).replace('"', "'")
    return f'(error "{prefix}: {message}")'


def read_source(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8", errors="replace")
    if args.program is not None:
        return args.program
    return sys.stdin.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Evaluate an ESTree JSON program and print its result descriptor.",
    )
    parser.add_argument("program", nargs="?", help="program JSON (default: read standard input)")
    parser.add_argument("-f", "--file", help="read program JSON from FILE")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail on input that is not valid JSON from the first character",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(
            level=config.get_log_level(),
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        strict = args.strict if args.strict is not None else config.is_strict_input()
        source = read_source(args)
        if not strict:
            source = recover_json(source)
        descriptor = Interpreter().eval(source)
    except SprigSyntaxError as exc:
        logger.error("malformed program: %s", exc)
        print(_error_line("malformed program", exc))
        return 1
    except OSError as exc:
        logger.error("cannot read program: %s", exc)
        print(_error_line("cannot read program", exc))
        return 1
    except ValueError as exc:
        # unknown SPRIG_LOG_LEVEL, non-integer SPRIG_RECURSION_LIMIT or SPRIG_STACK_SIZE
        logger.error("bad configuration: %s", exc)
        print(_error_line("bad configuration", exc))
        return 1

    print(descriptor)
    return 0


if __name__ == "__main__":
    sys.exit(main())
