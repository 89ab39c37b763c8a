"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary procedure
application. Every handler takes `(operands, env, evaluate_fn)`, where
`operands` is the Lisp list following the keyword.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.set_form import set_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.lambda_form import lambda_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.logic_forms import and_form, or_form
from minilisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("set"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("cond"): cond_form,
}
