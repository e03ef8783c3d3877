import logging

from etoile import EvaluatorFn
from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError, EtoileTypeError
from etoile.types.environment import Environment
from etoile.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body form, left unevaluated.
    if len(tail) != 2:
        raise EtoileArityError("lambda requires exactly 2 arguments: (lambda (params) body)")

    params, body = tail
    if not isinstance(params, list):
        raise EtoileTypeError(f"lambda parameters must be a list, got {params}")

    fn = Lambda(list(params), body, env)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("lambda created: %s (env depth %d)", fn, env.depth())
    return fn
