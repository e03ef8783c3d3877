from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError
from etoile.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        raise EtoileArityError("quote requires exactly 1 argument")
    return tail[0]
