"""Command-line host for Etoile: run a file, a single expression, or a REPL."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from etoile.config import configure_logging
from etoile.errors import EtoileError
from etoile.interpreter import Interpreter
from etoile.printer import pprint_expr
from etoile.reader.parser import tokenize, LPAREN, RPAREN

logger = logging.getLogger(__name__)

PROMPT = "etoile> "
CONTINUATION_PROMPT = "...     "


def _is_open(source: str) -> bool:
    """True while `source` has more open than close parens."""
    tokens = tokenize(source)
    return tokens.count(LPAREN) > tokens.count(RPAREN)


def repl(
    interp: Interpreter,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read input until EOF, printing each result or error and carrying on.

    An expression may span several lines; input is buffered until its
    parens balance (or EOF) before it is evaluated.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    interactive = stdin.isatty()
    buffer = ""
    while True:
        if interactive:
            stdout.write(CONTINUATION_PROMPT if buffer else PROMPT)
            stdout.flush()
        line = stdin.readline()
        if not line and not buffer.strip():
            break
        buffer += line
        if not buffer.strip():
            buffer = ""
            continue
        if line and _is_open(buffer):
            continue
        source, buffer = buffer, ""
        try:
            result = interp.eval(source)
        except EtoileError as e:
            logger.error("%s: %s", type(e).__name__, e)
            stdout.write(f"error: {e}\n")
            continue
        stdout.write(pprint_expr(result) + "\n")


def _run(interp: Interpreter, code: str, stdout: TextIO) -> int:
    try:
        result = interp.eval(code)
    except EtoileError as e:
        logger.error("%s: %s", type(e).__name__, e)
        stdout.write(f"error: {e}\n")
        return 1
    stdout.write(pprint_expr(result) + "\n")
    return 0


def main(argv: Optional[list[str]] = None, stdout: Optional[TextIO] = None) -> int:
    if stdout is None:
        stdout = sys.stdout
    parser = argparse.ArgumentParser(prog="etoile", description="Etoile Lisp interpreter")
    parser.add_argument("file", help="file to evaluate (if empty, starts a REPL)", nargs="?")
    parser.add_argument("-c", "--command", help="evaluate a single expression and print it")
    parser.add_argument("--no-prelude", action="store_true", help="do not load std.lisp")
    args = parser.parse_args(argv)

    configure_logging()
    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if args.command is not None:
        return _run(interp, args.command, stdout)
    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            return _run(interp, f.read(), stdout)
    repl(interp, stdout=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
