import logging

import pytest
from hypothesis import given, strategies as st

from etoile import errors
from etoile.builtin.env_builtin import build_standard_environment
from etoile.interpreter import Interpreter, evaluate_source
from etoile.printer import to_string
from etoile.reader.parser import NUMBER_RE
from etoile.result import Success, Failure
from etoile.types.symbol import Symbol


def test_success(env):
    result = evaluate_source("(+ 1 2)", env)
    assert result == Success(3.0)
    assert result.ok
    assert result.unwrap() == 3.0


def test_definitions_persist_in_env(env):
    assert evaluate_source("(define x 5)", env).ok
    assert evaluate_source("x", env).value == 5.0


def test_only_first_expression_is_evaluated(env):
    assert evaluate_source("(define a 1) (define b 2)", env).ok
    assert evaluate_source("b", env).kind is errors.EtoileUnboundSymbol


@pytest.mark.parametrize(
    "source,kind",
    [
        ("y", errors.EtoileUnboundSymbol),
        ("(set! y 10)", errors.EtoileUnboundSymbol),
        ("(if 1 2)", errors.EtoileArityError),
        ("(", errors.EtoileSyntaxError),
        (")", errors.EtoileSyntaxError),
        ("", errors.EtoileSyntaxError),
        ("()", errors.EtoileInvalidExpression),
        ("(1 2)", errors.EtoileInvalidExpression),
        ("(true 1)", errors.EtoileTypeError),
        ("(define 1 2)", errors.EtoileInvalidSymbol),
    ]
)
def test_failures_carry_their_kind(env, source, kind):
    result = evaluate_source(source, env)
    assert isinstance(result, Failure)
    assert not result.ok
    assert result.kind is kind
    assert result.message
    with pytest.raises(kind):
        result.unwrap()


def test_interpreter_method_uses_its_env(interp):
    interp.eval("(define x 2)")
    assert interp.evaluate_source("(* x x)") == Success(4.0)


def test_eval_returns_last_value(interp):
    assert interp.eval("(define x 2) (define y 3) (+ x y)") == 5.0


def test_eval_of_empty_source(interp):
    with pytest.raises(errors.EtoileSyntaxError):
        interp.eval("   ")


def test_string_prelude():
    interp = Interpreter(prelude="(define twice (lambda (n) (* 2 n)))")
    assert interp.eval("(twice 21)") == 42.0


def test_no_prelude():
    interp = Interpreter(prelude=None)
    with pytest.raises(errors.EtoileUnboundSymbol):
        interp.eval("inc")


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "std.lisp").write_text("(define answer 42)", encoding="utf-8")
    monkeypatch.setenv("ETOILE_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("answer") == 42.0


def test_missing_prelude_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("ETOILE_PRELUDE_PATH", str(tmp_path))
    interp = Interpreter()
    assert interp.eval("(+ 1 1)") == 2.0
    with pytest.raises(errors.EtoileUnboundSymbol):
        interp.eval("inc")


def test_debug_logging_traces_invocation(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="etoile"):
        interp.eval("((lambda (x) (+ x 1)) 5)")
    assert "lambda created" in caplog.text
    assert "invoke" in caplog.text
    assert "+ operands: [5.0, 1.0]" in caplog.text


def test_quote_roundtrip_through_entry_point(env):
    result = evaluate_source("(quote (a (1 2.5) ()))", env)
    assert result.value == [Symbol("a"), [1.0, 2.5], []]


def _is_number(s):
    return NUMBER_RE.fullmatch(s) is not None


_trees = st.recursive(
    st.one_of(
        st.floats(allow_nan=False, allow_infinity=False),
        st.text(st.characters(categories=("Ll", "Lu")), min_size=1, max_size=8)
        .filter(lambda s: not _is_number(s))
        .map(Symbol),
    ),
    lambda children: st.lists(children, max_size=4),
    max_leaves=15,
)


@given(_trees)
def test_quote_of_rendered_tree_is_structurally_equal(tree):
    result = evaluate_source(f"(quote {to_string(tree)})", build_standard_environment())
    assert result.ok
    assert result.value == tree
