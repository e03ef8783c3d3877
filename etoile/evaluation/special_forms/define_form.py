from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError, EtoileInvalidSymbol
from etoile.types.symbol import Symbol
from etoile.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    if len(tail) != 2:
        raise EtoileArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise EtoileInvalidSymbol(f"define first argument must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
