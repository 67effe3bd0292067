from mlisp.types.symbol import Symbol
from mlisp.types.expr import Binding, expr_equal, is_number, is_symbol, is_list, truth_symbol, TRUE, FALSE
from mlisp.types.environment import Environment
from mlisp.types.result import EvalResult, Value, Error, Unit, UnitType
