from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, TypeMismatchError
from mlisp.types.environment import Environment
from mlisp.types.result import Unit, UnitType
from mlisp.types.symbol import Symbol

FN_USAGE = "Function definitions must follow the pattern (fn fn-name (arg1 arg2 arg3 .. argn) <Expr>)"


def fn_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> UnitType:
    """
    (fn name (params...) body)
    The body is stored unevaluated and shared by every call. Produces Unit.
    """
    if len(tail) != 3:
        raise ArityError(FN_USAGE)

    name, params, body = tail
    if not isinstance(name, Symbol) or not isinstance(params, tuple):
        raise TypeMismatchError(FN_USAGE)
    if not all(isinstance(p, Symbol) for p in params):
        raise TypeMismatchError("Function parameters must be symbols.")

    env.add_fn(name.id, [p.id for p in params], body)
    return Unit
