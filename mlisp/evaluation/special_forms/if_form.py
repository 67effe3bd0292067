from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, UnitValueError
from mlisp.types.environment import Environment
from mlisp.types.expr import is_list
from mlisp.types.result import Unit


def if_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expr:
    """
    (if cond then else)
    The branch chosen by cond (else when cond is the empty list) is evaluated
    for its effects, then the value of the then branch is returned either way.
    """
    if len(tail) != 3:
        raise ArityError("Must have format: if (<argument>) (<then block>) (<else block>)")

    cond_expr, then_expr, else_expr = tail
    cond = evaluate_fn(cond_expr, env)
    if cond is Unit:
        raise UnitValueError("If expression predicate must return an expression.")

    is_false = is_list(cond) and not cond
    evaluate_fn(else_expr if is_false else then_expr, env)
    return evaluate_fn(then_expr, env)
