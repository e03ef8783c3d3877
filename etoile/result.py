"""Explicit evaluation outcomes returned by `etoile.interpreter.evaluate_source`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from etoile import LispValue
from etoile.errors import EtoileError


@dataclass(frozen=True)
class Success:
    value: LispValue

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> LispValue:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: EtoileError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> type[EtoileError]:
        return type(self.error)

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> LispValue:
        raise self.error


Result = Union[Success, Failure]
