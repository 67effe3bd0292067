from __future__ import annotations

from typing import Sequence

from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, TypeMismatchError
from mlisp.evaluation.special_forms.equality_forms import all_equal
from mlisp.printer import to_source
from mlisp.types.environment import Environment
from mlisp.types.expr import TRUE, FALSE, expr_equal, is_list, truth_symbol
from mlisp.types.symbol import Symbol


def not_form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """(not x)

    The operand is evaluated so its errors surface, but the verdict is taken
    from the operand as written: the symbols True/False are flipped, and a list
    yields the verdict `=` would give over its own (unevaluated) elements.
    So (not (= 1 2)) compares the symbol `=` with 1 and gives False.
    """
    if len(tail) != 1:
        raise ArityError("not requires exactly 1 argument")

    raw = tail[0]
    evaluate_fn(raw, env)

    if raw == TRUE:
        return FALSE
    if raw == FALSE:
        return TRUE
    if is_list(raw):
        return truth_symbol(all_equal(raw))
    raise TypeMismatchError(f"Invalid input for not operator: {to_source(raw)}")


def and_form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """(and a b ...)

    Operands are not evaluated: the result is True iff every operand is written
    exactly like the first one.
    """
    if not tail:
        raise ArityError("'and' with no arguments")
    first = tail[0]
    return truth_symbol(all(expr_equal(first, x) for x in tail))


def or_form(tail: Sequence[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Symbol:
    """(or a b ...)

    Operands are not evaluated: the result is True iff some operand is the
    literal symbol True.
    """
    if not tail:
        raise ArityError("'or' with no arguments")
    return truth_symbol(any(expr_equal(x, TRUE) for x in tail))
