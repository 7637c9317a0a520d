"""Registry of special forms for the slang evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
Each handler takes (operands, env, evaluate_fn) and returns either a value or
a TailCall telling the evaluator loop what to evaluate next.
"""

from slang.types.symbol import Symbol
from slang.evaluation.special_forms.quote_form import quote_form
from slang.evaluation.special_forms.define_form import define_form
from slang.evaluation.special_forms.lambda_form import lambda_form
from slang.evaluation.special_forms.begin_form import begin_form
from slang.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("if"): if_form,
}
