"""The outcome of evaluating a program: a value, Unit, or an error message."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mlisp import Expr


class UnitType:
    """Result of a side-effecting form such as print, let or fn."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Unit"


Unit = UnitType()


@dataclass(frozen=True)
class Value:
    expr: Expr


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self) -> str:
        return self.message


EvalResult = Union[Value, UnitType, Error]
