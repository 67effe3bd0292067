"""Text rendering used by the print form.

Rendering does not evaluate: a list is printed as written, while symbols are
resolved through the environment (variables print their bound expression,
functions print as an opaque func-object).
"""
import math

from mlisp import Expr
from mlisp.types.environment import Environment
from mlisp.types.symbol import Symbol


def format_number(n: float) -> str:
    """Shortest round-trip digits written as a plain decimal, never in exponent form.

    Integral values drop the fractional part: 6.0 -> "6", 2.5 -> "2.5", 1e-7 -> "0.0000001".
    """
    n = float(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"

    text = repr(n)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    mantissa, _, exponent = text.partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = int_part + frac_part
    point = len(int_part) + (int(exponent) if exponent else 0)

    if point <= 0:
        whole, frac = "0", "0" * -point + digits
    elif point >= len(digits):
        whole, frac = digits + "0" * (point - len(digits)), ""
    else:
        whole, frac = digits[:point], digits[point:]

    whole = whole.lstrip("0") or "0"
    frac = frac.rstrip("0")
    return sign + whole + ("." + frac if frac else "")


def render(expr: Expr, env: Environment) -> str:
    if isinstance(expr, Symbol):
        binding = env.lookup(expr.id)
        if binding is None:
            return expr.id
        if not binding.is_function:
            return render(binding.body, env)
        return f"<func-object: {expr.id}>"
    if isinstance(expr, tuple):
        return "(" + " ".join(render(x, env) for x in expr) + ")"
    return format_number(expr)


def to_source(expr: Expr) -> str:
    """Write an expression back as source text, without consulting any environment."""
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, tuple):
        return "(" + " ".join(to_source(x) for x in expr) + ")"
    return format_number(expr)
