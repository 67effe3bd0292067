from mlisp import Expr, EvaluatorFn
from mlisp.printer import render
from mlisp.types.environment import Environment
from mlisp.types.result import Unit, UnitType


def print_form(
    tail: list[Expr],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> UnitType:
    """Print space-separated renderings of the (unevaluated) operands followed by newline."""
    text = " ".join(render(expr, env) for expr in tail)
    print(text)
    return Unit
