"""Standard environment bootstrap.

Operators are ordinary two-parameter closures whose bodies call the reserved
form of the same name, e.g. `+` is bound to (lambda (x y) (+ x y)). Inside the
body the head `+` dispatches to the special form, so the closure does not
recurse into itself. Binding them makes the operators first-class values:
(define add +) then (add 1 2).
"""
from __future__ import annotations

from etoile.types.environment import Environment
from etoile.types.lambda_fn import Lambda
from etoile.types.symbol import Symbol

BINARY_OPERATORS = ("+", "-", "*", "=")

CONSTANTS = {
    Symbol("true"): True,
    Symbol("false"): False,
}


def _operator_closure(name: str, env: Environment) -> Lambda:
    x, y = Symbol("x"), Symbol("y")
    return Lambda([x, y], [Symbol(name), x, y], env)


def register(env: Environment) -> None:
    """Populate `env` with the boolean constants and operator closures."""
    env.update(CONSTANTS)
    for name in BINARY_OPERATORS:
        env.define(Symbol(name), _operator_closure(name, env))


def build_standard_environment() -> Environment:
    """Return a fresh root Environment. Nothing is shared between calls."""
    env = Environment()
    register(env)
    return env
