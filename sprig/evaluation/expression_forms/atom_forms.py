from sprig import EvaluatorFn, SprigValue
from sprig.codec import parse_literal
from sprig.errors import SprigUnboundIdentifier
from sprig.syntax.nodes import Identifier, Literal
from sprig.types.environment import Environment
from sprig.types.values import ErrorKind, error


def identifier_form(node: Identifier, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    try:
        return env.lookup(node.name)
    except SprigUnboundIdentifier:
        return error(ErrorKind.UNBOUND_IDENTIFIER)


def literal_form(node: Literal, env: Environment, evaluate_fn: EvaluatorFn) -> SprigValue:
    # Literals are validated every time they are evaluated, never cached.
    return parse_literal(node.raw)
