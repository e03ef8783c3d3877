"""Reserved arithmetic and equality forms.

These are the primitives the standard environment's operator closures bottom
out in. Every operand is evaluated left to right; arithmetic operands must be
Numbers (float, not bool).
"""

import logging
from functools import reduce
import operator

from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError, EtoileTypeError
from etoile.types.environment import Environment

logger = logging.getLogger(__name__)


def _eval_numbers(
    name: str, tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[float]:
    values = []
    for expr in tail:
        value = evaluate_fn(expr, env)
        if isinstance(value, bool) or not isinstance(value, float):
            raise EtoileTypeError(f"All arguments to {name} must be numbers, got {value!r}")
        values.append(value)
    logger.debug("%s operands: %s", name, values)
    return values


def plus_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(+ n ...) sum of all operands; (+) is 0."""
    return float(sum(_eval_numbers("+", tail, env, evaluate_fn)))


def minus_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(- n) negates; (- n m ...) subtracts left to right."""
    if not tail:
        raise EtoileArityError("- requires at least 1 argument")
    values = _eval_numbers("-", tail, env, evaluate_fn)
    if len(values) == 1:
        return -values[0]
    return reduce(operator.sub, values)


def times_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(* n ...) product of all operands; (*) is 1."""
    return reduce(operator.mul, _eval_numbers("*", tail, env, evaluate_fn), 1.0)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: element-wise for lists, identity for closures,
    and never equal across variants (so true is not 1)."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def equals_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(= a b ...) true when every operand equals the first."""
    if not tail:
        raise EtoileArityError("= requires at least 1 argument")
    values = [evaluate_fn(expr, env) for expr in tail]
    first = values[0]
    return all(is_equal(first, other) for other in values[1:])
