import pytest

from etoile import errors
from etoile.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote (1 2 3))", [1.0, 2.0, 3.0]),
        ("(quote a)", Symbol("a")),
        ("(quote (undefined-thing (also undefined)))",
         [Symbol("undefined-thing"), [Symbol("also"), Symbol("undefined")]]),
        ("(quote ())", []),
        ("(if true 1 2)", 1.0),
        ("(if false 1 2)", 2.0),
        ("(if 0 1 2)", 1.0),
        ("(if (quote ()) 1 2)", 1.0),
        ("(if true 1 never-bound)", 1.0),
        ("(if false never-bound 2)", 2.0),
        ("(if (= 1 1) (quote yes) (quote no))", Symbol("yes")),
        ("(define x 5)", 5.0),
        ("(+ 1 2 3)", 6.0),
        ("(+)", 0.0),
        ("(+ 1 2.5)", 3.5),
        ("(- 5)", -5.0),
        ("(- 10 3 2)", 5.0),
        ("(- -10 -5)", -5.0),
        ("(* 2 3 4)", 24.0),
        ("(*)", 1.0),
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(= 2 2 2)", True),
        ("(= 2 2 3)", False),
        ("(= 7)", True),
        ("(= true true)", True),
        ("(= true 1)", False),
        ("(= (quote (1 a)) (quote (1 a)))", True),
        ("(= (quote (1 a)) (quote (1 b)))", False),
    ]
)
def test_special_forms(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


def test_define_then_lookup(interp):
    interp.eval("(define x 5)")
    assert interp.eval("x") == 5.0


def test_define_evaluates_its_value(interp):
    assert interp.eval("(define x (+ 2 3))") == 5.0
    assert interp.eval("(define y x)") == 5.0


def test_set_updates_existing_binding(interp):
    interp.eval("(define y 1)")
    assert interp.eval("(set! y 10)") == 10.0
    assert interp.eval("y") == 10.0


def test_set_unbound_fails_before_evaluating_value(interp):
    with pytest.raises(errors.EtoileUnboundSymbol):
        interp.eval("(set! y (define z 1))")
    with pytest.raises(errors.EtoileUnboundSymbol):
        interp.eval("z")


def test_set_from_closure_reaches_enclosing_scope(interp):
    interp.eval("(define counter 0)")
    interp.eval("(define bump (lambda (n) (set! counter (+ counter n))))")
    interp.eval("(bump 5)")
    interp.eval("(bump 2)")
    assert interp.eval("counter") == 7.0


def test_define_inside_closure_stays_local(interp):
    interp.eval("(define f (lambda (n) (define hidden n)))")
    assert interp.eval("(f 3)") == 3.0
    with pytest.raises(errors.EtoileUnboundSymbol):
        interp.eval("hidden")


@pytest.mark.parametrize(
    "source",
    [
        "(quote)",
        "(quote a b)",
        "(if 1 2)",
        "(if 1 2 3 4)",
        "(define x)",
        "(define x 1 2)",
        "(lambda (x))",
        "(lambda (x) x x)",
        "(set! x)",
        "(-)",
        "(=)",
    ]
)
def test_arity_errors(interp, source):
    with pytest.raises(errors.EtoileArityError):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(define 1 2)", "(define (x) 2)", "(set! 1 2)"])
def test_symbol_required(interp, source):
    with pytest.raises(errors.EtoileInvalidSymbol):
        interp.eval(source)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 (quote a))",
        "(+ 1 true)",
        "(- (quote (1)))",
        "(* 2 false)",
        "(lambda x x)",
    ]
)
def test_type_errors(interp, source):
    with pytest.raises(errors.EtoileTypeError):
        interp.eval(source)


def test_unbound_and_arity_errors_are_distinct(interp):
    with pytest.raises(errors.EtoileUnboundSymbol) as unbound:
        interp.eval("y")
    with pytest.raises(errors.EtoileArityError) as arity:
        interp.eval("(if 1 2)")
    assert not isinstance(unbound.value, errors.EtoileArityError)
    assert not isinstance(arity.value, errors.EtoileUnboundSymbol)
    assert isinstance(unbound.value, errors.EtoileError)
    assert isinstance(arity.value, errors.EtoileError)
