"""Registry of special forms for the sigma evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function application.
Handlers take (tail, env, evaluate_fn) where `tail` is the unevaluated
operands of the form.
"""

from sigma.types.symbol import Symbol
from sigma.evaluation.special_forms.define_form import define_form
from sigma.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
