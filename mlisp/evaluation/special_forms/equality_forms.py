from __future__ import annotations

from typing import Sequence

from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, UnitValueError
from mlisp.types.environment import Environment
from mlisp.types.expr import expr_equal, truth_symbol
from mlisp.types.result import Unit
from mlisp.types.symbol import Symbol


def all_equal(values: Sequence[Expr]) -> bool:
    """True if every value is structurally equal to the first (vacuously true when empty)."""
    if not values:
        return True
    first = values[0]
    return all(expr_equal(first, other) for other in values[1:])


def _evaluate_operands(
    name: str, tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn
) -> list[Expr]:
    if not tail:
        raise ArityError(f"'{name}' with no arguments")
    values = []
    for expr in tail:
        value = evaluate_fn(expr, env)
        if value is Unit:
            raise UnitValueError("Failed to eval, got Unit")
        values.append(value)
    return values


def equal_form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """(= a b ...) -> True if every operand equals the first, else False."""
    return truth_symbol(all_equal(_evaluate_operands("=", tail, env, evaluate_fn)))


def not_equal_form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """(!= a b ...) -> True if at least one operand differs from the first, else False."""
    return truth_symbol(not all_equal(_evaluate_operands("!=", tail, env, evaluate_fn)))
