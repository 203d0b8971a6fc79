# Core type aliases for Sprig's data model.
# Syntax is a tree of frozen dataclasses (sprig.syntax.nodes) and runtime values
# are small immutable objects (sprig.types.values, sprig.types.closure).
#
# Naming guidance:
# - Node:       Use in reader/evaluator code to denote a syntax tree node.
# - SprigValue: Use in evaluator/runtime code to denote evaluated values
#               (Number, Boolean, Void, Closure or Error).
# Both aliases resolve to `Any`; the closed set of kinds is enforced by the
# dispatch tables, not by the type checker.

from typing import Any, Callable

# Runtime value alias
SprigValue = Any
# Syntax node alias
Node = Any

# Evaluator function type: expression evaluator passed into the form handlers
EvaluatorFn = Callable[..., SprigValue]
# Block executor type: statement-list runner passed into the statement handlers
ExecutorFn = Callable[..., SprigValue]
