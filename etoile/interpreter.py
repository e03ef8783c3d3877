from __future__ import annotations

import logging
from typing import Literal

from etoile import LispValue
from etoile.config import get_prelude_file
from etoile.errors import EtoileError, EtoileSyntaxError
from etoile.evaluation.evaluator import evaluate
from etoile.reader.parser import parse, read_all
from etoile.result import Result, Success, Failure
from etoile.types.environment import Environment
from etoile.builtin.env_builtin import build_standard_environment

logger = logging.getLogger(__name__)


def evaluate_source(source: str, env: Environment) -> Result:
    """Parse one expression from `source` and evaluate it against `env`.

    Tokens after the first expression are ignored. Etoile errors come back as
    a Failure instead of being raised.
    """
    try:
        expr = parse(source)
        logger.debug("evaluate %r", source)
        return Success(evaluate(expr, env))
    except EtoileError as e:
        logger.debug("evaluation failed: %s: %s", type(e).__name__, e)
        return Failure(e)


class Interpreter:
    """
    Reads and evaluates Etoile code, keeping one Environment across calls
    so that definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = build_standard_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_file()
            if path.is_file():
                logger.debug("loading prelude %s", path)
                self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`; return the last value."""
        exprs = read_all(code)
        if not exprs:
            raise EtoileSyntaxError("unexpected end of input")
        result = None
        for expr in exprs:
            result = evaluate(expr, self.env)
        return result

    def evaluate_source(self, source: str) -> Result:
        return evaluate_source(source, self.env)
