"""Array builtins: construction, access, copying updates and aggregation.

Arrays are tuples, so no builtin can mutate its input; every operation that
"changes" an array returns a new one and leaves the argument as it was.
Sorting, median and extrema go through numpy int64 arrays.
"""
from __future__ import annotations

import numpy as np

from arbor import Value
from arbor.errors import ArborEmptyCollection, ArborIndexError, ArborTypeError
from arbor.types.builtin import Builtin
from arbor.types.environment import Environment
from arbor.types.values import checked_int64, is_array, is_number, is_string, kind_name, render
from arbor.builtin.numeric import number_arg, trunc_div


def array_arg(name: str, value: Value) -> tuple:
    """Return `value` if it is an Array, else raise ArborTypeError."""
    if not is_array(value):
        raise ArborTypeError(f"{name} expects an Array, got {kind_name(value)} {render(value)}")
    return value


def _index_arg(name: str, xs: tuple, value: Value) -> int:
    i = number_arg(name, value)
    if i < 0 or i >= len(xs):
        raise ArborIndexError(f"{name}: index {i} out of range for array of length {len(xs)}")
    return i


def _non_empty(name: str, xs: tuple) -> tuple:
    if not xs:
        raise ArborEmptyCollection(f"{name} requires a non-empty array")
    return xs


def _number_elements(name: str, xs: tuple) -> list[int]:
    for x in xs:
        if not is_number(x):
            raise ArborTypeError(f"{name} expects an array of Numbers, found {kind_name(x)} {render(x)}")
    return list(xs)


def _int64_array(name: str, xs: tuple) -> np.ndarray:
    return np.asarray(_number_elements(name, xs), dtype=np.int64)


# -------------------------------
# Construction
# -------------------------------
def int_array(env: Environment, args: list[Value]) -> tuple:
    """(intArray n ...) -> array of the given Numbers."""
    for a in args:
        if not is_number(a):
            raise ArborTypeError(f"intArray expects Number arguments, got {kind_name(a)} {render(a)}")
    return tuple(args)


def string_array(env: Environment, args: list[Value]) -> tuple:
    """(stringArray s ...) -> array of the given Strings."""
    for a in args:
        if not is_string(a):
            raise ArborTypeError(f"stringArray expects String arguments, got {kind_name(a)} {render(a)}")
    return tuple(args)


# -------------------------------
# Access and copying updates
# -------------------------------
def length(env: Environment, args: list[Value]) -> int:
    return len(array_arg("len", args[0]))


def get(env: Environment, args: list[Value]) -> Value:
    xs = array_arg("get", args[0])
    return xs[_index_arg("get", xs, args[1])]


def set_(env: Environment, args: list[Value]) -> tuple:
    """(set arr i v) -> copy of arr with position i replaced by v."""
    xs = array_arg("set", args[0])
    i = _index_arg("set", xs, args[1])
    return xs[:i] + (args[2],) + xs[i + 1:]


def append(env: Environment, args: list[Value]) -> tuple:
    return array_arg("append", args[0]) + (args[1],)


def remove(env: Environment, args: list[Value]) -> tuple:
    """(remove arr i) -> copy of arr without position i."""
    xs = array_arg("remove", args[0])
    i = _index_arg("remove", xs, args[1])
    return xs[:i] + xs[i + 1:]


def reverse(env: Environment, args: list[Value]) -> tuple:
    return tuple(reversed(array_arg("rev", args[0])))


def sort(env: Environment, args: list[Value]) -> tuple:
    """Ascending numeric sort of an array of Numbers."""
    xs = array_arg("sort", args[0])
    return tuple(int(n) for n in np.sort(_int64_array("sort", xs), kind="stable"))


def is_empty(env: Environment, args: list[Value]) -> bool:
    return len(array_arg("empty?", args[0])) == 0


def head(env: Environment, args: list[Value]) -> Value:
    return _non_empty("head", array_arg("head", args[0]))[0]


def tail(env: Environment, args: list[Value]) -> tuple:
    return _non_empty("tail", array_arg("tail", args[0]))[1:]


def last(env: Environment, args: list[Value]) -> Value:
    return _non_empty("last", array_arg("last", args[0]))[-1]


# -------------------------------
# Aggregation
# -------------------------------
def sum_(env: Environment, args: list[Value]) -> int:
    total = sum(_number_elements("sum", array_arg("sum", args[0])))
    return checked_int64(total, "sum")


def product(env: Environment, args: list[Value]) -> int:
    result = 1
    for n in _number_elements("product", array_arg("product", args[0])):
        result = checked_int64(result * n, "product")
    return result


def median(env: Environment, args: list[Value]) -> int:
    """Middle element; for even lengths the truncated mean of the two middles."""
    xs = array_arg("median", args[0])
    ordered = np.sort(_int64_array("median", xs))
    _non_empty("median", xs)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return int(ordered[mid])
    return trunc_div(int(ordered[mid - 1]) + int(ordered[mid]), 2)


def mean(env: Environment, args: list[Value]) -> int:
    """Arithmetic mean truncated toward zero."""
    xs = _number_elements("mean", array_arg("mean", args[0]))
    _non_empty("mean", tuple(xs))
    return trunc_div(sum(xs), len(xs))


def max_array(env: Environment, args: list[Value]) -> int:
    xs = array_arg("maxArray", args[0])
    values = _int64_array("maxArray", xs)
    _non_empty("maxArray", xs)
    return int(values.max())


def min_array(env: Environment, args: list[Value]) -> int:
    xs = array_arg("minArray", args[0])
    values = _int64_array("minArray", xs)
    _non_empty("minArray", xs)
    return int(values.min())


def register(table: dict[str, Builtin]) -> None:
    """Register array builtins into the given table."""
    table.update(
        {
            "intArray": Builtin("intArray", None, int_array),
            "stringArray": Builtin("stringArray", None, string_array),
            "len": Builtin("len", 1, length),
            "get": Builtin("get", 2, get),
            "set": Builtin("set", 3, set_),
            "append": Builtin("append", 2, append),
            "remove": Builtin("remove", 2, remove),
            "rev": Builtin("rev", 1, reverse),
            "sort": Builtin("sort", 1, sort),
            "empty?": Builtin("empty?", 1, is_empty),
            "head": Builtin("head", 1, head),
            "tail": Builtin("tail", 1, tail),
            "last": Builtin("last", 1, last),
            "sum": Builtin("sum", 1, sum_),
            "product": Builtin("product", 1, product),
            "median": Builtin("median", 1, median),
            "mean": Builtin("mean", 1, mean),
            "maxArray": Builtin("maxArray", 1, max_array),
            "minArray": Builtin("minArray", 1, min_array),
        }
    )
