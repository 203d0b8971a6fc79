"""Registry of expression forms for the Sprig evaluator.

Maps each expression node class to the handler that evaluates it. Handlers
take (node, env, evaluate_fn) and return a value; an Error returned by any
sub-evaluation is passed straight back up.
"""

from sprig.syntax.nodes import (
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    FunctionExpression,
    Identifier,
    Literal,
    LogicalExpression,
    UnaryExpression,
)
from sprig.evaluation.expression_forms.atom_forms import identifier_form, literal_form
from sprig.evaluation.expression_forms.binary_form import binary_form
from sprig.evaluation.expression_forms.logic_forms import unary_form, logical_form
from sprig.evaluation.expression_forms.conditional_form import conditional_form
from sprig.evaluation.expression_forms.function_form import function_form
from sprig.evaluation.expression_forms.call_form import call_form
from sprig.evaluation.expression_forms.assignment_form import assignment_form

EXPRESSION_FORMS = {
    Identifier: identifier_form,
    Literal: literal_form,
    BinaryExpression: binary_form,
    UnaryExpression: unary_form,
    LogicalExpression: logical_form,
    ConditionalExpression: conditional_form,
    FunctionExpression: function_form,
    CallExpression: call_form,
    AssignmentExpression: assignment_form,
}
