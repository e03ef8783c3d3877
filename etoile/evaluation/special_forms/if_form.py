from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError
from etoile.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise EtoileArityError("if requires exactly 3 arguments: (if test then else)")

    test, then_expr, else_expr = tail
    cond = evaluate_fn(test, env)
    # Only the Boolean false is falsy; 0 and () select the then-branch
    if cond is False:
        return evaluate_fn(else_expr, env)
    return evaluate_fn(then_expr, env)
