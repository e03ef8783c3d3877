"""Core evaluator for the Etoile interpreter.

A recursive tree walker: recursion depth follows the nesting depth of the
expression and of closure calls. There is no tail-call elimination, so
unbounded recursion ends in Python's RecursionError.
"""

from __future__ import annotations

from etoile import SExpression, LispValue
from etoile.errors import EtoileInvalidExpression, EtoileTypeError
from etoile.types.lambda_fn import Lambda
from etoile.types.environment import Environment
from etoile.types.symbol import Symbol
from etoile.evaluation.apply import apply
from etoile.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case bool() | float() | Lambda():
            return expr

        case []:
            raise EtoileInvalidExpression("Cannot evaluate empty list")

        case [head, *operands]:
            if isinstance(head, Symbol):
                # --- Special forms take priority over any binding ---
                if head in SPECIAL_FORMS:
                    return SPECIAL_FORMS[head](operands, env, evaluate)
                fn = env.lookup(head)
                if not isinstance(fn, Lambda):
                    raise EtoileTypeError(f"'{head}' is not a function")
            elif isinstance(head, Lambda):
                fn = head
            elif isinstance(head, list):
                # e.g. ((lambda (x) x) 1): evaluate the head, then apply
                fn = evaluate(head, env)
                if not isinstance(fn, Lambda):
                    raise EtoileTypeError(f"{fn!r} is not a function")
            else:
                raise EtoileInvalidExpression(f"Invalid expression: {expr!r}")

            args = [evaluate(arg, env) for arg in operands]
            return apply(fn, args, evaluate)

    raise EtoileInvalidExpression(f"Invalid expression: {expr!r}")
