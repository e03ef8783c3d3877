"""
  Etoile Reader: tokenizer and recursive-descent parser

- The tokenizer pads every paren with spaces and splits on whitespace.
  There is no quoting, escaping or comment syntax.
- The parser emits Python primitives instead of cons cells:

    - lists   -> Python list
    - numbers -> float: optional sign, ASCII digits with an optional
                 fraction, optional exponent (`12`, `-3.5`, `.5`, `1e3`)
    - symbols -> Symbol

Symbols are never resolved here; binding happens at evaluation time.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from etoile import SExpression
from etoile.errors import EtoileSyntaxError
from etoile.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"

NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def tokenize(source: str) -> list[str]:
    """Split `source` into a mutable list of paren and atom tokens."""
    return source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def parse_atom(token: str) -> SExpression:
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    """Cursor over a token list with one token of lookahead."""

    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def remaining(self) -> list[str]:
        return self.tokens[self.pos:]

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise EtoileSyntaxError("unexpected end of input")

        if tok == RPAREN:
            raise EtoileSyntaxError("unexpected close paren")

        if tok == LPAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise EtoileSyntaxError("unexpected end of input")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        return parse_atom(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse_tokens(tokens: list[str]) -> SExpression:
    """Parse one expression from the front of `tokens`, removing the tokens
    it used. Any tokens after that expression are left in the list.
    """
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    del tokens[: stream.pos]
    return expr


def parse(source: str) -> SExpression:
    """Parse exactly one expression from `source`; trailing tokens are ignored."""
    return TokenStream(tokenize(source)).parse_expr()


def read_all(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(tokenize(source)).parse_all())
