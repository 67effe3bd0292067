"""Helpers over the expression data model.

An expression is one of:
    - a float   (Number)
    - a Symbol  (Symbol)
    - a tuple   (List of expressions)

Tuples are immutable, so a function body or list literal is shared by every
frame that refers to it.
"""
from __future__ import annotations

from typing import NamedTuple

from mlisp import Expr
from mlisp.types.symbol import Symbol


class Binding(NamedTuple):
    """A name's entry in an environment frame. No params means a plain variable."""
    params: tuple[str, ...]
    body: Expr

    @property
    def is_function(self) -> bool:
        return bool(self.params)


TRUE = Symbol("True")
FALSE = Symbol("False")


def is_number(x: Expr) -> bool:
    return isinstance(x, float) or (isinstance(x, int) and not isinstance(x, bool))


def is_symbol(x: Expr) -> bool:
    return isinstance(x, Symbol)


def is_list(x: Expr) -> bool:
    return isinstance(x, tuple)


def expr_equal(a: Expr, b: Expr) -> bool:
    """Deep, order-sensitive structural equality. NaN is never equal to itself."""
    if is_list(a) and is_list(b):
        if len(a) != len(b):
            return False
        return all(expr_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return float(a) == float(b)
    if is_symbol(a) and is_symbol(b):
        return a == b
    return False


def truth_symbol(flag: bool) -> Symbol:
    return TRUE if flag else FALSE
