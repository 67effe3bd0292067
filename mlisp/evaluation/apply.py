"""Symbol resolution and function application for mlisp.

A symbol resolves through the environment's frame stack:
- unbound symbols evaluate to themselves;
- variables (no parameters) evaluate their bound expression in the current
  environment;
- functions are applied to the supplied argument expressions.

Application evaluates the arguments in the caller's environment, then pushes
one frame holding the parameters and evaluates the body on top of the full,
live stack (dynamic scope). The frame is popped on every exit path,
including errors.
"""

from __future__ import annotations

import logging
from typing import Sequence

from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, UnitValueError
from mlisp.types.environment import Environment
from mlisp.types.expr import Binding
from mlisp.types.result import Unit
from mlisp.types.symbol import Symbol


logger = logging.getLogger(__name__)


def apply_symbol(
    sym: Symbol,
    args: Sequence[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """Resolve `sym` and, if it names a function, call it with `args`.

    A variable applied to arguments evaluates to its bound expression; the
    arguments are not evaluated.
    """
    binding = env.lookup(sym.id)
    if binding is None:
        return sym
    if not binding.is_function:
        return evaluate_fn(binding.body, env)
    return apply_function(sym, binding, args, env, evaluate_fn)


def apply_function(
    sym: Symbol,
    fn: Binding,
    args: Sequence[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """Call the function bound to `sym`.

    Raises ArityError unless exactly one argument is supplied per parameter,
    and UnitValueError if an argument evaluates to Unit.
    """
    if len(args) != len(fn.params):
        raise ArityError(
            f"{sym.id}: provided {len(args)} arguments but expected {len(fn.params)}"
        )

    values = []
    for arg in args:
        value = evaluate_fn(arg, env)
        if value is Unit:
            raise UnitValueError("Cannot pass Unit as an argument to a function.")
        values.append(value)

    logger.debug("calling %s with %d arguments", sym.id, len(values))
    env.push_context()
    try:
        for name, value in zip(fn.params, values):
            env.add_var(name, value)
        return evaluate_fn(fn.body, env)
    finally:
        # Popped without a call frame, so this also holds while a
        # RecursionError unwinds at the interpreter's depth limit.
        env.contexts.pop()
