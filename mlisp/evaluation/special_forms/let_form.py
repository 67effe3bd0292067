from mlisp import Expr, EvaluatorFn
from mlisp.errors import ArityError, TypeMismatchError, UnitValueError
from mlisp.types.environment import Environment
from mlisp.types.result import Unit, UnitType
from mlisp.types.symbol import Symbol


def let_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> UnitType:
    """
    (let name expr)
    Binds the value of expr in the innermost frame. Produces Unit.
    """
    if len(tail) != 2:
        raise ArityError("Invalid variable definition. Should look like (let someVar someExpr)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TypeMismatchError("Second element of variable def must be a symbol and third must be expression.")

    value = evaluate_fn(val_expr, env)
    if value is Unit:
        raise UnitValueError("cannot assign Unit to a variable.")
    env.add_var(name.id, value)
    return Unit
