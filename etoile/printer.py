"""Rendering of Etoile values back to source-like text."""

from __future__ import annotations

import math

from etoile import LispValue
from etoile.types.lambda_fn import Lambda
from etoile.types.symbol import Symbol

DEFAULT_MAX_LINE_LENGTH = 80


def format_number(n: float) -> str:
    if math.isfinite(n) and n == int(n):
        return str(int(n))
    return repr(n)


def to_string(value: LispValue) -> str:
    """Render a value: numbers as decimals, lists as (a b c), booleans as
    true/false, closures as their lambda form."""
    match value:
        # bool first: it is an int subclass
        case bool():
            return "true" if value else "false"
        case float() | int():
            return format_number(float(value))
        case Symbol():
            return value.name
        case list():
            return "(" + " ".join(to_string(v) for v in value) + ")"
        case Lambda():
            return str(value)
    return repr(value)


def pprint_expr(
    expr: LispValue, indent: int = 0, max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> str:
    """Pretty-print `expr`, breaking lists that do not fit on one line.

    Broken lists keep the head on the first line and put each remaining
    element on its own line, indented one level deeper.
    """
    pad = "  " * (indent + 1)
    if isinstance(expr, Lambda):
        expr = [Symbol("lambda"), expr.formals, expr.body]
    if not isinstance(expr, list) or not expr:
        return to_string(expr)

    single_line = to_string(expr)
    if len(single_line) + indent * 2 <= max_line_length:
        return single_line

    parts = [pprint_expr(e, indent + 1, max_line_length) for e in expr]
    lines = ["(" + parts[0]]
    for part in parts[1:]:
        lines.append(pad + part)
    lines[-1] += ")"
    return "\n".join(lines)
