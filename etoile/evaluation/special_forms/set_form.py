from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileInvalidSymbol, EtoileArityError, EtoileUnboundSymbol
from etoile.types.symbol import Symbol
from etoile.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise EtoileArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise EtoileInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")
    # Checked before the value expression runs, so it has no side effects on failure
    if env.find(var_sym) is None:
        raise EtoileUnboundSymbol(f"Cannot set! {var_sym}: it is not defined")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
