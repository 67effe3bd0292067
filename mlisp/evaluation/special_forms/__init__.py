"""Registry of special forms for the mlisp evaluator.

Maps reserved Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before treating a list
as an application. Every handler has the signature

    handler(tail, env, evaluate_fn) -> Expr | Unit
"""

from mlisp.types.symbol import Symbol
from mlisp.evaluation.special_forms.arithmetic_forms import add_form, sub_form, mul_form, div_form
from mlisp.evaluation.special_forms.equality_forms import equal_form, not_equal_form
from mlisp.evaluation.special_forms.logic_forms import not_form, and_form, or_form
from mlisp.evaluation.special_forms.let_form import let_form
from mlisp.evaluation.special_forms.fn_form import fn_form
from mlisp.evaluation.special_forms.print_form import print_form
from mlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("+"): add_form,
    Symbol("-"): sub_form,
    Symbol("*"): mul_form,
    Symbol("/"): div_form,
    Symbol("="): equal_form,
    Symbol("!="): not_equal_form,
    Symbol("not"): not_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("fn"): fn_form,
    Symbol("let"): let_form,
    Symbol("print"): print_form,
    Symbol("if"): if_form,
}
