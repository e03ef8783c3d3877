"""Runtime environment for Etoile.

An Environment is one scope frame: a mapping from Symbols to evaluated values
plus an optional link to the enclosing (outer) frame. Closures hold a reference
to the frame they were created in, so frames stay alive as long as any closure
that captured them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from etoile import LispValue
from etoile.errors import EtoileInvalidSymbol, EtoileUnboundSymbol
from etoile.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises EtoileInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EtoileInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def is_defined(self, name: Symbol) -> bool:
        """True if `name` is bound in this frame. Outer frames are not consulted."""
        return name in self.vars

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding for `name` in the chain.

        Raises EtoileUnboundSymbol if no frame binds the name.
        """
        env = self.find(name)
        if env is None:
            raise EtoileUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up `name` here, then in each outer frame in turn.

        Raises EtoileUnboundSymbol if no frame binds the name.
        """
        env = self.find(name)
        if env is None:
            raise EtoileUnboundSymbol(f"Unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the root."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
