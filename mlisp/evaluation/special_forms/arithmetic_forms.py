"""Numeric special forms: + - * /.

Every operand is evaluated left to right; the first failure aborts the form.
- and / fold from the first operand, so a single operand is returned unchanged.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable, Sequence

from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, TypeMismatchError, UnitValueError
from mlisp.printer import to_source
from mlisp.types.environment import Environment
from mlisp.types.expr import is_number
from mlisp.types.result import Unit


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: dividing by zero yields an infinity or NaN instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _numeric_operands(
    op_name: str,
    verb: str,
    tail: Sequence[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> list[float]:
    if not tail:
        raise ArityError(f"Must perform {op_name} on at least one number")
    numbers = []
    for expr in tail:
        value = evaluate_fn(expr, env)
        if value is Unit:
            raise UnitValueError(f"Failed to eval expr: {to_source(expr)}")
        if not is_number(value):
            raise TypeMismatchError(f"Can only {verb} numbers, got {to_source(value)}")
        numbers.append(float(value))
    return numbers


def _fold_form(op_name: str, verb: str, fn: Callable[[float, float], float]):
    def form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> float:
        return reduce(fn, _numeric_operands(op_name, verb, tail, env, evaluate_fn))

    form.__name__ = f"{verb}_form"
    form.__doc__ = f"({op_name} n ...) folds the evaluated operands left to right."
    return form


add_form = _fold_form("addition", "sum", operator.add)
sub_form = _fold_form("subtraction", "subtract", operator.sub)
mul_form = _fold_form("multiplication", "multiply", operator.mul)
div_form = _fold_form("division", "divide", _divide)
