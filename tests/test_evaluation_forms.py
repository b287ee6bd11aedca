import pytest

from minilang.errors import MinilangArityError, MinilangSyntaxError, MinilangUnboundSymbol
from minilang.evaluation.evaluator import evaluate
from minilang.reader.parser import read
from minilang.types.environment import Environment
from minilang.types.node import EMPTY_FORM, NumberLiteral


@pytest.fixture
def eval_src(env):
    """Evaluate a single-entry program in the shared fixture environment."""
    def _eval(source):
        [expr] = read(source).children
        return evaluate(expr, env)
    return _eval


# -----------------------------------------------------
# let
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(let ())", EMPTY_FORM),
        ("(let 42)", NumberLiteral(42)),
        ("(let x 42 x)", NumberLiteral(42)),
        ("(let x 42 (+ x 42))", NumberLiteral(84)),
        ("(let x 3 y 4 (+ x y))", NumberLiteral(7)),
        ("(let x 0 (let x 42 x))", NumberLiteral(42)),
        ("(let x 3 y (+ x 1) (+ x y))", NumberLiteral(7)),
        ("(let x 1 (let y (+ x 1) (+ x y)))", NumberLiteral(3)),
        ("(let x 0 (let x (+ x 1) x))", NumberLiteral(1)),
    ],
)
def test_let(eval_src, source, expected):
    assert eval_src(source) == expected


def test_let_is_not_recursive(eval_src):
    with pytest.raises(MinilangUnboundSymbol):
        eval_src("(let x (+ x 0) x)")


def test_let_odd_bindings(eval_src):
    with pytest.raises(MinilangArityError):
        eval_src("(let x 1 y (+ x y))")


def test_let_without_body(eval_src):
    with pytest.raises(MinilangArityError):
        eval_src("(let)")


def test_let_name_must_be_identifier(eval_src):
    with pytest.raises(MinilangSyntaxError):
        eval_src("(let 1 2 3)")


def test_let_pops_rib_on_failure(env, eval_src):
    with pytest.raises(MinilangUnboundSymbol):
        eval_src("(let x 1 (let y 2 z))")
    assert env.depth == 0


def test_let_scope_ends_with_body(eval_src):
    with pytest.raises(MinilangUnboundSymbol):
        eval_src("(+ (let x 1 x) x)")


# -----------------------------------------------------
# fn
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("((fn ()))", EMPTY_FORM),
        ("((fn 42))", NumberLiteral(42)),
        ("((fn x x) 42)", NumberLiteral(42)),
        ("((fn x 42) 0)", NumberLiteral(42)),
        ("((fn x (+ x 1)) 42)", NumberLiteral(43)),
        ("((fn x y x) 42 0)", NumberLiteral(42)),
        ("((fn x y (+ x y)) 42 1)", NumberLiteral(43)),
        # nested scopes
        ("((fn x ((fn x (+ x 1)) (+ x 4))) 2)", NumberLiteral(7)),
        # higher order: a function passed as an argument heads an application
        ("((fn x y (x (+ y 3))) (fn x (+ x 2)) 5)", NumberLiteral(10)),
        # function bound by let
        ("(let y (fn x (+ x 1)) (y 42))", NumberLiteral(43)),
        # head produced by a nested expression
        ("((let f (fn x (+ x 1)) f) 1)", NumberLiteral(2)),
        # the body sees the caller's bindings
        ("(let a 10 ((fn x (+ x a)) 1))", NumberLiteral(11)),
    ],
)
def test_fn(eval_src, source, expected):
    assert eval_src(source) == expected


def test_fn_arity_mismatch(eval_src):
    with pytest.raises(MinilangArityError):
        eval_src("((fn x x) 42 42)")
    with pytest.raises(MinilangArityError):
        eval_src("((fn x y x) 42)")


def test_fn_without_body(eval_src):
    with pytest.raises(MinilangSyntaxError):
        eval_src("((fn))")


def test_fn_params_must_be_identifiers(eval_src):
    with pytest.raises(MinilangSyntaxError):
        eval_src("((fn 1 x) 2)")


def test_fn_arguments_evaluated_in_caller_scope(eval_src):
    # the argument `x` refers to the caller's x, not the parameter
    assert eval_src("(let x 5 ((fn x (+ x 1)) x))") == NumberLiteral(6)


def test_fn_pops_rib_on_failure(env, eval_src):
    with pytest.raises(MinilangUnboundSymbol):
        eval_src("((fn x (+ x y)) 1)")
    assert env.depth == 0


def test_fresh_environment_per_entry():
    env = Environment()
    assert evaluate(read("(let x 1 x)").children[0], env) == NumberLiteral(1)
    assert env.depth == 0
