"""Lexical scoping, closure capture and mutation visibility."""

from arbor.evaluation.evaluator import evaluate
from arbor.interpreter import Interpreter
from tests.trees import assign, block, call, ident, int_array, lam, let, num


def test_capture_survives_scope_exit(env):
    # make_adder's frame is gone by the time the returned closure runs
    make_adder = lam(["k"], lam(["n"], call("add", ident("n"), ident("k"))))
    program = let("add5", call(make_adder, num(5)), call("add5", num(1)))
    assert evaluate(program, env) == 6


def test_closure_created_in_block_outlives_block(env):
    program = let(
        "get", block(let("hidden", num(41), lam([], call("add", ident("hidden"), num(1))))),
        call("get"),
    )
    assert evaluate(program, env) == 42


def test_closure_observes_later_assignment(env):
    program = let(
        "x", num(1),
        let(
            "f", lam([], ident("x")),
            block(assign("x", num(2)), call("f")),
        ),
    )
    assert evaluate(program, env) == 2


def test_closures_share_captured_scope(env):
    # Two closures over the same counter see each other's updates
    program = let(
        "count", num(0),
        let(
            "bump", lam([], assign("count", call("add", ident("count"), num(1)))),
            let(
                "read", lam([], ident("count")),
                block(call("bump"), call("bump"), call("bump"), call("read")),
            ),
        ),
    )
    assert evaluate(program, env) == 3


def test_closure_assignment_mutates_defining_scope(env):
    program = let(
        "total", num(0),
        block(
            call(lam(["n"], assign("total", ident("n"))), num(9)),
            ident("total"),
        ),
    )
    assert evaluate(program, env) == 9


def test_parameter_shadows_outer_binding(env):
    program = block(
        call(lam(["x"], assign("x", num(100))), num(1)),
        ident("x"),
    )
    # Assigning the parameter leaves the global x untouched
    assert evaluate(program, env) == 10


def test_let_shadowing_restored_outside_block(env):
    program = block(
        block(let("x", num(99), ident("x"))),
        ident("x"),
    )
    assert evaluate(program, env) == 10
    assert evaluate(block(let("x", num(99), ident("x"))), env) == 99
    assert env.lookup("x") == 10


def test_static_not_dynamic_scope(env):
    # f refers to the y visible where f was created, not where it is called
    program = let(
        "y", num(1),
        let(
            "f", lam([], ident("y")),
            block(let("y", num(2), call("f"))),
        ),
    )
    assert evaluate(program, env) == 1


def test_arguments_evaluated_in_callers_scope(env):
    program = let(
        "f", lam(["a"], ident("a")),
        block(let("local", num(8), call("f", ident("local")))),
    )
    assert evaluate(program, env) == 8


def test_set_does_not_alter_bound_array(env):
    program = let(
        "arr", int_array(1, 2, 3),
        let("changed", call("set", ident("arr"), num(0), num(99)),
            call("intArray", call("get", ident("arr"), num(0)), call("get", ident("changed"), num(0)))),
    )
    assert evaluate(program, env) == (1, 99)


def test_fresh_interpreters_are_independent():
    first = Interpreter()
    first.eval(assign("x", num(0)))
    assert first.eval(ident("x")) == 0
    assert Interpreter().eval(ident("x")) == 10


def test_interpreter_keeps_top_level_bindings(interp):
    interp.eval(let("kept", num(3), num(0)))
    assert interp.eval(ident("kept")) == 3


def test_closure_ignores_later_let_in_same_scope(env):
    program = block(
        let("y", num(1), num(0)),
        let("g", lam([], ident("y")), num(0)),
        let("y", num(2), num(0)),
        call("g"),
    )
    assert evaluate(program, env) == 1


def test_closure_ignores_names_defined_after_it(env):
    program = block(
        let("g", lam([], ident("later")), num(0)),
        let("later", num(5), num(0)),
        call("g"),
    )
    assert evaluate(program, env) == "later"


def test_assignment_after_redefinition_misses_old_closure(env):
    # The second Let makes a new cell; assigning it leaves g's cell alone
    program = block(
        let("y", num(1), num(0)),
        let("g", lam([], ident("y")), num(0)),
        let("y", num(2), num(0)),
        assign("y", num(3)),
        call("g"),
    )
    assert evaluate(program, env) == 1
