"""Closure representation for Etoile."""

from __future__ import annotations

from io import StringIO

from etoile import SExpression, LispValue
from etoile.errors import EtoileArityError
from etoile.types.environment import Environment
from etoile.types.symbol import Symbol


class Lambda:
    """A first-class closure: formal parameters, an unevaluated body and the
    environment that was current when the lambda form was evaluated.

    The environment is shared, not copied, so later definitions or `set!`
    mutations in that scope are visible when the closure runs.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        from etoile.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(to_string(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self}>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` positionally to the formals in a new child of the
        captured environment and return it.

        Raises EtoileArityError when the argument count differs from the
        parameter count.
        """
        if len(args) != len(self.formals):
            raise EtoileArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        # Non-Symbol formals are rejected here by Environment.define
        for name, value in zip(self.formals, args):
            new_env.define(name, value)
        return new_env
