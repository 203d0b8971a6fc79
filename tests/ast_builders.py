"""Small builders for ESTree JSON nodes, as an ESTree parser would emit them."""


def program(*body):
    return {"type": "Program", "body": list(body), "sourceType": "script"}


def num(n):
    return {"type": "Literal", "value": n, "raw": str(n)}


def boolean(b):
    return {"type": "Literal", "value": b, "raw": "true" if b else "false"}


def raw_literal(raw):
    return {"type": "Literal", "raw": raw}


def ident(name):
    return {"type": "Identifier", "name": name}


def binary(op, left, right):
    return {"type": "BinaryExpression", "operator": op, "left": left, "right": right}


def unary(op, argument):
    return {"type": "UnaryExpression", "operator": op, "argument": argument, "prefix": True}


def logical(op, left, right):
    return {"type": "LogicalExpression", "operator": op, "left": left, "right": right}


def cond(test, consequent, alternate):
    return {
        "type": "ConditionalExpression",
        "test": test,
        "consequent": consequent,
        "alternate": alternate,
    }


def fn(params, *body):
    return {
        "type": "FunctionExpression",
        "id": None,
        "params": [ident(p) for p in params],
        "body": block(*body),
    }


def arrow(params, expression):
    return {
        "type": "ArrowFunctionExpression",
        "params": [ident(p) for p in params],
        "body": expression,
        "expression": True,
    }


def call(callee, *args):
    if isinstance(callee, str):
        callee = ident(callee)
    return {"type": "CallExpression", "callee": callee, "arguments": list(args)}


def assign(name, value):
    return {"type": "AssignmentExpression", "operator": "=", "left": ident(name), "right": value}


def var(name, init=None):
    return var_many((name, init))


def var_many(*pairs):
    return {
        "type": "VariableDeclaration",
        "kind": "var",
        "declarations": [
            {"type": "VariableDeclarator", "id": ident(name), "init": init}
            for name, init in pairs
        ],
    }


def stmt(expression):
    return {"type": "ExpressionStatement", "expression": expression}


def ret(argument=None):
    return {"type": "ReturnStatement", "argument": argument}


def block(*body):
    return {"type": "BlockStatement", "body": list(body)}


def while_(test, *body):
    return {"type": "WhileStatement", "test": test, "body": block(*body)}


def for_(init, test, update, *body):
    return {"type": "ForStatement", "init": init, "test": test, "update": update, "body": block(*body)}
