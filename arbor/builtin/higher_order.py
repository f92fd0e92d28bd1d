"""Higher-order array builtins: map, filter and fold.

Each takes a procedure value and applies it element by element through the
shared apply engine. For a closure that means one fresh child scope of its
captured environment per call, so parameter bindings never leak between
iterations or into the caller.
"""
from __future__ import annotations

from arbor import Value
from arbor.errors import ArborArityError, ArborTypeError
from arbor.types.builtin import Builtin
from arbor.types.closure import Closure
from arbor.types.environment import Environment
from arbor.types.values import kind_name, render
from arbor.evaluation.apply import apply as apply_engine
from arbor.evaluation.evaluator import evaluate
from arbor.builtin.arrays import array_arg


def procedure_arg(name: str, value: Value, arity: int) -> Closure | Builtin:
    """Return `value` if it is a procedure taking `arity` arguments."""
    if isinstance(value, Closure):
        if value.arity != arity:
            raise ArborArityError(
                f"{name} expects a procedure of {arity} parameter(s), got {value.arity}"
            )
        return value
    if isinstance(value, Builtin):
        if not value.accepts(arity):
            raise ArborArityError(
                f"{name} expects a procedure of {arity} parameter(s), {value.name} takes {value.arity}"
            )
        return value
    raise ArborTypeError(f"{name} expects a procedure, got {kind_name(value)} {render(value)}")


def map_(env: Environment, args: list[Value]) -> tuple:
    """(map f arr) -> array of f(x) for each x, in order."""
    fn = procedure_arg("map", args[0], 1)
    xs = array_arg("map", args[1])
    return tuple(apply_engine(fn, [x], env, evaluate) for x in xs)


def filter_(env: Environment, args: list[Value]) -> tuple:
    """(filter f arr) -> elements x of arr for which f(x) is exactly true."""
    fn = procedure_arg("filter", args[0], 1)
    xs = array_arg("filter", args[1])
    return tuple(x for x in xs if apply_engine(fn, [x], env, evaluate) is True)


def fold(env: Environment, args: list[Value]) -> Value:
    """(fold f seed arr) -> f(...f(f(seed, x0), x1)..., xn), left to right."""
    fn = procedure_arg("fold", args[0], 2)
    acc = args[1]
    xs = array_arg("fold", args[2])
    for x in xs:
        acc = apply_engine(fn, [acc, x], env, evaluate)
    return acc


def register(table: dict[str, Builtin]) -> None:
    """Register higher-order builtins into the given table."""
    table.update(
        {
            "map": Builtin("map", 2, map_),
            "filter": Builtin("filter", 2, filter_),
            "fold": Builtin("fold", 3, fold),
        }
    )
