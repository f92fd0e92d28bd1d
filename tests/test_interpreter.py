"""Whole programs fed through the JSON front door, as the CLI does."""

import json

import pytest

from arbor.errors import ArborDivisionByZero, ArborReadError
from arbor.interpreter import Interpreter, global_environment


def I(name):
    return {"Identifier": name}


def N(n):
    return {"Number": n}


def app(*items):
    return {"Application": list(items)}


def lam(params, body):
    return {"Lambda": [{"Parameters": [I(p) for p in params]}, body]}


def rec(name, params, body, then):
    """Let-bind `name` to a recursive closure, then evaluate `then`."""
    return {"Let": [I(name), N(0), {"Block": [
        {"Assignment": [I(name), lam(params, body)]},
        then,
    ]}]}


FIB = rec(
    "fib", ["n"],
    {"Cond": [
        {"Clause": [app(I("<"), I("n"), N(2)), I("n")]},
        {"Clause": [app(I(">="), I("n"), N(2)),
                    app(I("add"),
                        app(I("fib"), app(I("sub"), I("n"), N(1))),
                        app(I("fib"), app(I("sub"), I("n"), N(2))))]},
    ]},
    app(I("fib"), N(10)),
)

SUM_TO = rec(
    "loop", ["n", "acc"],
    {"Cond": [
        {"Clause": [app(I("zero?"), I("n")), I("acc")]},
        {"Clause": [app(I(">"), I("n"), N(0)),
                    app(I("loop"), app(I("sub"), I("n"), N(1)), app(I("add"), I("acc"), I("n")))]},
    ]},
    app(I("loop"), N(30), N(0)),
)


@pytest.mark.parametrize(
    "program,expected",
    [
        ({"String": "hello_world!"}, "hello_world!"),
        (app(I("add"), I("x"), app(I("mul"), I("v"), I("i"))), "15"),
        (app(I("fact"), N(10)), "3628800"),
        (FIB, "55"),
        (SUM_TO, "465"),
        (app(I("sort"), app(I("intArray"), N(3), N(1), N(2))), "[1, 2, 3]"),
        (app(I("filter"), lam(["n"], app(I("eq"), app(I("mod"), I("n"), N(2)), N(0))),
             app(I("intArray"), N(1), N(2), N(3), N(4))), "[2, 4]"),
        (app(I("stringArray"), {"String": "a"}, {"String": "b"}), "[a, b]"),
        (app(I("zero?"), N(0)), "true"),
        ({"Block": []}, "false"),
        (lam(["a"], I("a")), "<lambda>"),
        (I("add"), "<function>"),
    ],
)
def test_run_programs(interp, program, expected):
    assert interp.run(json.dumps(program)) == expected


def test_eval_json_returns_value(interp):
    assert interp.eval_json(json.dumps(app(I("intArray"), N(1)))) == (1,)


def test_errors_propagate(interp):
    with pytest.raises(ArborDivisionByZero):
        interp.run(json.dumps(app(I("div"), N(1), N(0))))


def test_read_errors_propagate(interp):
    with pytest.raises(ArborReadError):
        interp.run('{"Nope": 1}')


def test_custom_initial_bindings():
    interp = Interpreter(bindings={"answer": 42})
    assert interp.run(json.dumps(I("answer"))) == "42"
    # Without the defaults, x is just a name
    assert interp.run(json.dumps(I("x"))) == "x"


def test_global_environment_defaults():
    env = global_environment()
    assert env.values() == {"i": 1, "v": 5, "x": 10}
    assert env.lookup_builtin("map") is not None
