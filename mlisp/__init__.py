# Core type aliases for mlisp's data model.
# Expressions are plain Python values: float for numbers, Symbol for names and
# tuple for lists. Tuples are immutable, so sub-trees are shared, never copied.
#
# Naming guidance:
# - Expr: a parsed form or an evaluated value (the language does not separate them).
# - EvaluatorFn: the evaluator handed to special forms.

from typing import Any, Callable

Expr = Any

EvaluatorFn = Callable[..., Any]
