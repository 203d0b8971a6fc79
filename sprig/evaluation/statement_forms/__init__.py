"""Registry of statement forms for the Sprig block executor.

Handlers take (node, env, evaluate_fn, execute_fn) and return None to let the
block continue, or a value (a `return` result or an Error) that ends the
enclosing block. Expression statements are handled by the block executor
itself, since only it knows whether it runs the program scope.
"""

from sprig.syntax.nodes import (
    BlockStatement,
    ForStatement,
    ReturnStatement,
    VariableDeclaration,
    WhileStatement,
)
from sprig.evaluation.statement_forms.declaration_form import declaration_form
from sprig.evaluation.statement_forms.return_form import return_form
from sprig.evaluation.statement_forms.block_form import block_form
from sprig.evaluation.statement_forms.loop_forms import while_loop_form, for_loop_form

STATEMENT_FORMS = {
    VariableDeclaration: declaration_form,
    ReturnStatement: return_form,
    BlockStatement: block_form,
    WhileStatement: while_loop_form,
    ForStatement: for_loop_form,
}
