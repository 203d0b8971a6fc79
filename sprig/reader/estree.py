"""Reader for ESTree-shaped JSON programs.

Turns the JSON tree produced by an ESTree parser (esprima, acorn, ...) into
the frozen node classes of sprig.syntax.nodes. Only the node kinds Sprig
evaluates are accepted; anything else raises SprigSyntaxError naming the
offending node type.

    program = loads('{"type": "Program", "body": [...]}')
"""

from __future__ import annotations

import json
from typing import Any, Callable

from sprig.errors import SprigSyntaxError
from sprig.syntax.nodes import (
    ASSIGNMENT_OPERATORS,
    BINARY_OPERATORS,
    LOGICAL_OPERATORS,
    UNARY_OPERATORS,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    ConditionalExpression,
    ExpressionStatement,
    ForStatement,
    FunctionExpression,
    Identifier,
    Literal,
    LogicalExpression,
    Program,
    ReturnStatement,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
    WhileStatement,
)

JsonNode = dict[str, Any]


def loads(text: str) -> Program:
    """Parse JSON text and read it as a program."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SprigSyntaxError(f"invalid JSON: {exc}") from exc
    return read_program(data)


def read_program(data: JsonNode) -> Program:
    """Read a Program node. A bare {"body": [...]} object is accepted too."""
    if not isinstance(data, dict):
        raise SprigSyntaxError(f"Program must be a JSON object, got {type(data).__name__}")
    node_type = data.get("type", "Program")
    if node_type != "Program":
        raise SprigSyntaxError(f"Expected a Program node, got {node_type}")
    return Program(_read_statements(_field(data, "body", "Program")))


def read_statement(node: JsonNode) -> Any:
    node_type = _node_type(node)
    reader = _STATEMENT_READERS.get(node_type)
    if reader is None:
        raise SprigSyntaxError(f"Unsupported statement type {node_type}")
    return reader(node)


def read_expression(node: JsonNode) -> Any:
    node_type = _node_type(node)
    reader = _EXPRESSION_READERS.get(node_type)
    if reader is None:
        raise SprigSyntaxError(f"Unsupported expression type {node_type}")
    return reader(node)


# --- helpers ---

def _node_type(node: Any) -> str:
    if not isinstance(node, dict) or "type" not in node:
        raise SprigSyntaxError(f"Expected a node object with a type, got {node!r}")
    return node["type"]


def _field(node: JsonNode, key: str, node_type: str) -> Any:
    if node.get(key) is None:
        raise SprigSyntaxError(f"{node_type} is missing required field '{key}'")
    return node[key]


def _optional_expression(node: JsonNode, key: str) -> Any:
    child = node.get(key)
    return None if child is None else read_expression(child)


def _read_statements(nodes: Any) -> tuple:
    if not isinstance(nodes, list):
        raise SprigSyntaxError(f"Expected a list of statements, got {nodes!r}")
    return tuple(read_statement(n) for n in nodes)


def _read_body(node: JsonNode, node_type: str) -> tuple:
    """Loop and function bodies: a BlockStatement, or a single statement."""
    body = _field(node, "body", node_type)
    if _node_type(body) == "BlockStatement":
        return _read_statements(_field(body, "body", "BlockStatement"))
    return (read_statement(body),)


def _identifier_name(node: Any, context: str) -> str:
    if _node_type(node) != "Identifier":
        raise SprigSyntaxError(f"{context} must be an Identifier, got {node['type']}")
    return _field(node, "name", "Identifier")


def _operator(node: JsonNode, node_type: str, allowed: frozenset) -> str:
    op = _field(node, "operator", node_type)
    if op not in allowed:
        raise SprigSyntaxError(f"Unsupported {node_type} operator {op!r}")
    return op


# --- statements ---

def _read_variable_declaration(node: JsonNode) -> VariableDeclaration:
    declarators = []
    for decl in _field(node, "declarations", "VariableDeclaration"):
        name = _identifier_name(_field(decl, "id", "VariableDeclarator"), "Declared name")
        declarators.append(VariableDeclarator(name, _optional_expression(decl, "init")))
    return VariableDeclaration(tuple(declarators))


def _read_expression_statement(node: JsonNode) -> ExpressionStatement:
    return ExpressionStatement(read_expression(_field(node, "expression", "ExpressionStatement")))


def _read_return(node: JsonNode) -> ReturnStatement:
    return ReturnStatement(_optional_expression(node, "argument"))


def _read_block(node: JsonNode) -> BlockStatement:
    return BlockStatement(_read_statements(_field(node, "body", "BlockStatement")))


def _read_while(node: JsonNode) -> WhileStatement:
    return WhileStatement(_optional_expression(node, "test"), _read_body(node, "WhileStatement"))


def _read_for(node: JsonNode) -> ForStatement:
    init = node.get("init")
    if init is not None:
        if _node_type(init) == "VariableDeclaration":
            init = _read_variable_declaration(init)
        else:
            init = read_expression(init)
    return ForStatement(
        init,
        _optional_expression(node, "test"),
        _optional_expression(node, "update"),
        _read_body(node, "ForStatement"),
    )


# --- expressions ---

def _read_identifier(node: JsonNode) -> Identifier:
    return Identifier(_field(node, "name", "Identifier"))


def _read_literal(node: JsonNode) -> Literal:
    raw = node.get("raw")
    if raw is None and "value" in node:
        # some producers omit raw; rebuild it from the JSON value
        raw = json.dumps(node["value"])
    return Literal(raw)


def _read_binary(node: JsonNode) -> BinaryExpression:
    return BinaryExpression(
        _operator(node, "BinaryExpression", BINARY_OPERATORS),
        read_expression(_field(node, "left", "BinaryExpression")),
        read_expression(_field(node, "right", "BinaryExpression")),
    )


def _read_unary(node: JsonNode) -> UnaryExpression:
    return UnaryExpression(
        _operator(node, "UnaryExpression", UNARY_OPERATORS),
        read_expression(_field(node, "argument", "UnaryExpression")),
    )


def _read_logical(node: JsonNode) -> LogicalExpression:
    return LogicalExpression(
        _operator(node, "LogicalExpression", LOGICAL_OPERATORS),
        read_expression(_field(node, "left", "LogicalExpression")),
        read_expression(_field(node, "right", "LogicalExpression")),
    )


def _read_conditional(node: JsonNode) -> ConditionalExpression:
    return ConditionalExpression(
        read_expression(_field(node, "test", "ConditionalExpression")),
        read_expression(_field(node, "consequent", "ConditionalExpression")),
        read_expression(_field(node, "alternate", "ConditionalExpression")),
    )


def _read_params(node: JsonNode) -> tuple[str, ...]:
    return tuple(_identifier_name(p, "Parameter") for p in node.get("params") or [])


def _read_function(node: JsonNode) -> FunctionExpression:
    return FunctionExpression(_read_params(node), _read_body(node, node["type"]))


def _read_arrow_function(node: JsonNode) -> FunctionExpression:
    body = _field(node, "body", "ArrowFunctionExpression")
    if _node_type(body) == "BlockStatement":
        return _read_function(node)
    # concise body: `(n) => n + 1` returns its expression
    return FunctionExpression(_read_params(node), (ReturnStatement(read_expression(body)),))


def _read_call(node: JsonNode) -> CallExpression:
    return CallExpression(
        read_expression(_field(node, "callee", "CallExpression")),
        tuple(read_expression(a) for a in node.get("arguments") or []),
    )


def _read_assignment(node: JsonNode) -> AssignmentExpression:
    _operator(node, "AssignmentExpression", ASSIGNMENT_OPERATORS)
    target = _identifier_name(_field(node, "left", "AssignmentExpression"), "Assignment target")
    return AssignmentExpression(target, read_expression(_field(node, "right", "AssignmentExpression")))


_STATEMENT_READERS: dict[str, Callable[[JsonNode], Any]] = {
    "VariableDeclaration": _read_variable_declaration,
    "ExpressionStatement": _read_expression_statement,
    "ReturnStatement": _read_return,
    "BlockStatement": _read_block,
    "WhileStatement": _read_while,
    "ForStatement": _read_for,
}

_EXPRESSION_READERS: dict[str, Callable[[JsonNode], Any]] = {
    "Identifier": _read_identifier,
    "Literal": _read_literal,
    "BinaryExpression": _read_binary,
    "UnaryExpression": _read_unary,
    "LogicalExpression": _read_logical,
    "ConditionalExpression": _read_conditional,
    "FunctionExpression": _read_function,
    "ArrowFunctionExpression": _read_arrow_function,
    "CallExpression": _read_call,
    "AssignmentExpression": _read_assignment,
}
