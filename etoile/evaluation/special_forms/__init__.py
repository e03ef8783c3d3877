"""Registry of special forms for the Etoile evaluator.

Maps reserved Symbols to handler functions that receive their operands
unevaluated. The evaluator consults this table before any environment lookup,
so a reserved name cannot be shadowed by an ordinary definition.
"""

from etoile.types.symbol import Symbol
from etoile.evaluation.special_forms.quote_form import quote_form
from etoile.evaluation.special_forms.if_form import if_form
from etoile.evaluation.special_forms.define_form import define_form
from etoile.evaluation.special_forms.lambda_form import lambda_form
from etoile.evaluation.special_forms.set_form import set_form
from etoile.evaluation.special_forms.arithmetic_forms import (
    plus_form,
    minus_form,
    times_form,
    equals_form,
)

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("set!"): set_form,
    Symbol("+"): plus_form,
    Symbol("-"): minus_form,
    Symbol("*"): times_form,
    Symbol("="): equals_form,
}
