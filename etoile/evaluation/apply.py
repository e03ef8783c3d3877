"""Application engine for Etoile.

Closure invocation lives here so the evaluator and any helper that needs to
call a Lambda share one code path:

- The caller evaluates operands (applicative order) and passes the values.
- A fresh child of the closure's captured environment receives the bindings.
- The body is evaluated once in that child environment.
"""

import logging

from etoile import LispValue, EvaluatorFn
from etoile.types.lambda_fn import Lambda
from etoile.errors import EtoileTypeError

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda to already-evaluated argument values.

    Raises EtoileArityError when `args` does not match the formals.
    """
    new_env = fn.extend_env(args)
    logger.debug("invoke %s with %s", fn, args)
    return evaluate_fn(fn.body, new_env)


def apply(head: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply `head` if it is a Lambda, otherwise raise a type error."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    raise EtoileTypeError(f"{head} is not a function")
