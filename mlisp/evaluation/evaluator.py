"""Core evaluator for the mlisp interpreter.

Dispatch on the shape of the expression:
- numbers are self-evaluating;
- symbols resolve through the environment (unbound symbols evaluate to themselves);
- the empty list evaluates to itself;
- a list headed by a reserved symbol is a special form;
- a list headed by a bound symbol is an application;
- any other list evaluates every element, drops Unit results and returns
  the remaining values in order.

Errors are raised as EvalError and stop evaluation at the first failure.
`evaluate` is the boundary that turns them into Error results.
"""

from __future__ import annotations

import logging

from mlisp import Expr
from mlisp.errors import EvalError
from mlisp.evaluation.apply import apply_symbol
from mlisp.evaluation.special_forms import SPECIAL_FORMS
from mlisp.types.environment import Environment
from mlisp.types.result import EvalResult, Error, Unit, UnitType, Value
from mlisp.types.symbol import Symbol


logger = logging.getLogger(__name__)


def evaluate(expr: Expr, env: Environment) -> EvalResult:
    """Evaluate `expr` and report the outcome as Value, Unit or Error."""
    try:
        result = evaluate0(expr, env)
    except EvalError as e:
        logger.debug("evaluation failed: %s", e)
        return Error(str(e))
    except RecursionError:
        return Error("Maximum recursion depth exceeded during evaluation.")
    if result is Unit:
        return Unit
    return Value(result)


def evaluate0(expr: Expr, env: Environment) -> Expr | UnitType:
    """
    Core evaluator. Returns an expression or Unit, raises EvalError.
    """
    match expr:
        case ():
            return ()
        case (Symbol() as head, *tail_args):
            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0)
            if env.contains_key(head.id):
                return apply_symbol(head, tail_args, env, evaluate0)
            return evaluate_list(expr, env)
        case tuple():
            return evaluate_list(expr, env)
        case Symbol():
            return apply_symbol(expr, (), env, evaluate0)

    # --- Numbers return as-is ---
    return expr


def evaluate_list(items: tuple, env: Environment) -> tuple:
    values = []
    for item in items:
        value = evaluate0(item, env)
        if value is not Unit:
            values.append(value)
    return tuple(values)
