from sprig.syntax.nodes import (
    Identifier,
    Literal,
    BinaryExpression,
    UnaryExpression,
    LogicalExpression,
    ConditionalExpression,
    FunctionExpression,
    CallExpression,
    AssignmentExpression,
    VariableDeclarator,
    VariableDeclaration,
    ExpressionStatement,
    ReturnStatement,
    BlockStatement,
    WhileStatement,
    ForStatement,
    Program,
)

__all__ = [
    "Identifier",
    "Literal",
    "BinaryExpression",
    "UnaryExpression",
    "LogicalExpression",
    "ConditionalExpression",
    "FunctionExpression",
    "CallExpression",
    "AssignmentExpression",
    "VariableDeclarator",
    "VariableDeclaration",
    "ExpressionStatement",
    "ReturnStatement",
    "BlockStatement",
    "WhileStatement",
    "ForStatement",
    "Program",
]
