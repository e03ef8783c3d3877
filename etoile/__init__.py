# Core type aliases for Etoile's data model.
# Values are plain Python objects: float for numbers, bool for booleans,
# list for lists, plus the Symbol and Lambda classes in etoile.types.
#
# - SExpression: use in reader code and special forms for unevaluated forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Code is data here, so both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]
