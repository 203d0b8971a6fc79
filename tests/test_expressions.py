import pytest

from sprig.evaluation.evaluator import evaluate
from sprig.reader.estree import read_expression
from sprig.types import Number, ErrorKind, error

from ast_builders import (
    num, boolean, raw_literal, ident, binary, unary, logical, cond, fn, call, assign,
    var, stmt, ret,
)

INT64_MAX = 9223372036854775807
INT64_MIN = -9223372036854775808


# -----------------------------------------------------
# Arithmetic and comparison
# -----------------------------------------------------

@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        ("+", 7, 2, 9),
        ("-", 7, 2, 5),
        ("*", 7, 2, 14),
        ("/", 7, 2, 3),
        ("/", -7, 2, -3),
        ("/", 7, -2, -3),
        ("/", -7, -2, 3),
        ("/", 0, 5, 0),
        ("-", 2, 7, -5),
        ("*", -3, 4, -12),
    ],
)
def test_arithmetic_truncates_toward_zero(run, op, a, b, expected):
    assert run(stmt(binary(op, num(a), num(b)))) == f"(value (number {expected}))"


def test_divide_by_zero(run):
    assert run(stmt(binary("/", num(1), num(0)))) == '(error "divide by zero")'


def test_integers_wrap_at_64_bits(run):
    assert run(stmt(binary("+", num(INT64_MAX), num(1)))) == f"(value (number {INT64_MIN}))"
    assert run(stmt(binary("*", num(INT64_MAX), num(2)))) == "(value (number -2))"


@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        ("==", 3, 3, True),
        ("==", 3, 4, False),
        ("<", 3, 4, True),
        ("<", 4, 3, False),
        (">", 4, 3, True),
        (">", 3, 3, False),
        ("<=", 3, 3, True),
        ("<=", 4, 3, False),
        (">=", 3, 3, True),
        (">=", -1, 0, False),
    ],
)
def test_relational(run, op, a, b, expected):
    word = "true" if expected else "false"
    assert run(stmt(binary(op, num(a), num(b)))) == f"(value (boolean {word}))"


@pytest.mark.parametrize(
    "left,right",
    [
        (boolean(True), num(1)),
        (num(1), boolean(False)),
        (fn([], ret(num(1))), num(1)),
    ],
)
def test_binary_rejects_non_numbers(run, left, right):
    assert run(stmt(binary("+", left, right))) == '(error "invalid binary type(s)")'


def test_binary_on_void(run):
    program = [var("x", num(0)), stmt(binary("==", assign("x", num(1)), num(1)))]
    assert run(*program) == '(error "invalid binary type(s)")'


def test_binary_left_error_wins(run):
    assert run(stmt(binary("+", ident("a"), binary("/", num(1), num(0))))) == '(error "unbound identifier")'
    assert run(stmt(binary("+", num(1), binary("/", num(1), num(0))))) == '(error "divide by zero")'


# -----------------------------------------------------
# Unary and logical
# -----------------------------------------------------

def test_not(run):
    assert run(stmt(unary("!", boolean(True)))) == "(value (boolean false))"
    assert run(stmt(unary("!", boolean(False)))) == "(value (boolean true))"
    assert run(stmt(unary("!", num(5)))) == '(error "invalid unary type")'


def test_negation(run):
    assert run(stmt(unary("-", num(5)))) == "(value (number -5))"
    assert run(stmt(unary("-", unary("-", num(5))))) == "(value (number 5))"
    assert run(stmt(unary("-", boolean(True)))) == '(error "invalid unary type")'


@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        ("&&", True, True, "true"),
        ("&&", True, False, "false"),
        ("&&", False, True, "false"),
        ("||", False, False, "false"),
        ("||", False, True, "true"),
        ("||", True, False, "true"),
    ],
)
def test_logical(run, op, a, b, expected):
    assert run(stmt(logical(op, boolean(a), boolean(b)))) == f"(value (boolean {expected}))"


def test_logical_rejects_non_booleans(run):
    assert run(stmt(logical("&&", num(1), boolean(True)))) == '(error "invalid logical type(s)")'
    assert run(stmt(logical("||", boolean(True), num(0)))) == '(error "invalid logical type(s)")'


@pytest.mark.parametrize("op,left", [("&&", False), ("||", True)])
def test_logical_does_not_short_circuit(run, op, left):
    # touch() flips x; it must run even though the left operand decides the result
    program = [
        var("x", num(0)),
        var("touch", fn([], stmt(assign("x", num(1))), ret(boolean(True)))),
        var("r", logical(op, boolean(left), call("touch"))),
        stmt(ident("x")),
    ]
    assert run(*program) == "(value (number 1))"


# -----------------------------------------------------
# Conditional
# -----------------------------------------------------

def test_conditional_picks_branch(run):
    assert run(stmt(cond(boolean(True), num(1), num(2)))) == "(value (number 1))"
    assert run(stmt(cond(boolean(False), num(1), num(2)))) == "(value (number 2))"


def test_conditional_skips_untaken_branch(run):
    program = [
        var("x", num(0)),
        var("hit", fn([], stmt(assign("x", num(1))), ret(num(5)))),
        var("r", cond(binary("<", num(1), num(2)), num(2), call("hit"))),
        stmt(ident("x")),
    ]
    assert run(*program) == "(value (number 0))"


def test_conditional_untaken_error_is_ignored(run):
    assert run(stmt(cond(boolean(False), binary("/", num(1), num(0)), num(3)))) == "(value (number 3))"


def test_conditional_requires_boolean_test(run):
    assert run(stmt(cond(num(5), num(1), num(2)))) == '(error "invalid conditional type(s)")'


# -----------------------------------------------------
# Identifiers, literals, assignment
# -----------------------------------------------------

def test_declared_identifier(run):
    assert run(var("x", num(3)), stmt(binary("+", ident("x"), num(1)))) == "(value (number 4))"


def test_unbound_identifier(run):
    assert run(var("x", num(3)), stmt(ident("y"))) == '(error "unbound identifier")'


@pytest.mark.parametrize("raw", ["1.5", "'hi'", "null", "1e3"])
def test_bad_literal(run, raw):
    assert run(stmt(raw_literal(raw))) == '(error "not a whole number")'


def test_bad_literal_propagates(run):
    assert run(stmt(binary("+", num(1), raw_literal("2.5")))) == '(error "not a whole number")'


def test_assignment_updates_binding(run):
    program = [var("x", num(1)), stmt(assign("x", num(5))), stmt(binary("*", ident("x"), num(2)))]
    assert run(*program) == "(value (number 10))"


def test_assignment_yields_void(run):
    assert run(var("x", num(1)), stmt(assign("x", num(2)))) == "(value (void))"


def test_assignment_to_unbound(run):
    assert run(stmt(assign("y", num(1)))) == '(error "unbound identifier")'


def test_assignment_to_unbound_mutates_nothing(env):
    env.define("x", Number(1))
    expr = read_expression(assign("y", assign("x", num(9))))
    assert evaluate(expr, env) == error(ErrorKind.UNBOUND_IDENTIFIER)
    assert env.lookup("x") == Number(1)
    assert not env.is_bound("y")


def test_assignment_error_keeps_old_value(env):
    env.define("x", Number(1))
    expr = read_expression(assign("x", binary("/", num(1), num(0))))
    assert evaluate(expr, env) == error(ErrorKind.DIVIDE_BY_ZERO)
    assert env.lookup("x") == Number(1)


def test_assignment_visible_in_nested_scope(run):
    program = [
        var("x", num(1)),
        var("get", fn([], ret(ident("x")))),
        stmt(assign("x", num(2))),
        stmt(call("get")),
    ]
    assert run(*program) == "(value (number 2))"
