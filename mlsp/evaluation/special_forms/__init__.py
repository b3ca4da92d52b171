"""Registry of special forms for the mlsp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before operators and variable lookup.
"""

from mlsp.types.symbol import Symbol
from mlsp.evaluation.special_forms.if_form import if_form
from mlsp.evaluation.special_forms.while_form import while_form
from mlsp.evaluation.special_forms.do_form import do_form
from mlsp.evaluation.special_forms.set_form import set_form
from mlsp.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("while"): while_form,
    Symbol("do"): do_form,
    Symbol("set"): set_form,
    Symbol("print"): print_form,
}
