import pytest

from arbor.errors import ArborArityError, ArborNoMatchingClause, ArborTypeError, ArborUnboundSymbol
from arbor.evaluation.evaluator import evaluate
from tests.trees import assign, block, call, cond, ident, int_array, lam, let, num, text


def test_map_doubles(env):
    expr = call("map", lam(["n"], call("mul", ident("n"), num(2))), int_array(1, 2, 3))
    assert evaluate(expr, env) == (2, 4, 6)


def test_map_empty(env):
    assert evaluate(call("map", lam(["n"], ident("n")), int_array()), env) == ()


def test_map_with_builtin(env):
    assert evaluate(call("map", ident("abs"), int_array(-1, 2, -3)), env) == (1, 2, 3)


def test_filter_keeps_true_results(env):
    expr = call(
        "filter",
        lam(["n"], call(">", ident("n"), num(2))),
        int_array(1, 5, 2, 7),
    )
    assert evaluate(expr, env) == (5, 7)


def test_filter_ignores_non_bool_truthiness(env):
    # A Number result is not Bool true, so nothing is kept
    assert evaluate(call("filter", lam(["n"], num(1)), int_array(1, 2)), env) == ()


def test_fold_sums_left_to_right(env):
    expr = call("fold", lam(["acc", "n"], call("add", ident("acc"), ident("n"))), num(0), int_array(1, 2, 3))
    assert evaluate(expr, env) == 6


def test_fold_order(env):
    # ((100 - 1) - 2) - 3
    expr = call("fold", lam(["acc", "n"], call("sub", ident("acc"), ident("n"))), num(100), int_array(1, 2, 3))
    assert evaluate(expr, env) == 94


def test_fold_builds_array(env):
    expr = call(
        "fold",
        lam(["acc", "n"], call("append", ident("acc"), call("mul", ident("n"), ident("n")))),
        int_array(),
        int_array(1, 2, 3),
    )
    assert evaluate(expr, env) == (1, 4, 9)


def test_fold_empty_returns_seed(env):
    assert evaluate(call("fold", ident("add"), num(7), int_array()), env) == 7


def test_callback_sees_captured_scope(env):
    program = let("k", num(3), call("map", lam(["n"], call("mul", ident("n"), ident("k"))), int_array(1, 2)))
    assert evaluate(program, env) == (3, 6)


def test_callback_bindings_do_not_leak(env, strict):
    evaluate(call("map", lam(["tmp"], ident("tmp")), int_array(1, 2)), env)
    with pytest.raises(ArborUnboundSymbol):
        evaluate(ident("tmp"), env)


def test_callback_can_mutate_captured_variable(env):
    program = let(
        "count", num(0),
        block(
            call("map", lam(["n"], assign("count", call("add", ident("count"), ident("n")))), int_array(1, 2, 3)),
            ident("count"),
        ),
    )
    assert evaluate(program, env) == 6


@pytest.mark.parametrize(
    "expr",
    [
        call("map", lam(["a", "b"], ident("a")), int_array(1)),
        call("filter", lam([], num(1)), int_array(1)),
        call("fold", lam(["a"], ident("a")), num(0), int_array(1)),
        call("map", ident("add"), int_array(1)),
    ],
)
def test_callback_arity_mismatch(env, expr):
    with pytest.raises(ArborArityError):
        evaluate(expr, env)


@pytest.mark.parametrize(
    "expr",
    [
        call("map", num(1), int_array(1)),
        call("filter", text("not-a-proc"), int_array(1)),
        call("map", lam(["n"], ident("n")), num(3)),
        call("fold", ident("add"), num(0), text("abc")),
    ],
)
def test_wrong_kinds(env, expr):
    with pytest.raises(ArborTypeError):
        evaluate(expr, env)


def test_errors_inside_callback_propagate(env):
    expr = call("map", lam(["n"], cond((call("zero?", ident("n")), num(0)))), int_array(0, 1))
    with pytest.raises(ArborNoMatchingClause):
        evaluate(expr, env)
