"""Value kinds produced by evaluation, and their printable form.

Numbers are ints, booleans are bools, strings are strs and arrays are tuples.
Because bool is a subclass of int in Python, every Number check must exclude
bools explicitly.
"""

from __future__ import annotations

from arbor import Value
from arbor.errors import ArborOverflowError
from arbor.types.builtin import Builtin
from arbor.types.closure import Closure

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_number(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_string(value: Value) -> bool:
    return isinstance(value, str)


def is_array(value: Value) -> bool:
    return isinstance(value, tuple)


def in_int64_range(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX


def checked_int64(n: int, op: str) -> int:
    """Return `n` unchanged, or raise ArborOverflowError if it leaves int64."""
    if not in_int64_range(n):
        raise ArborOverflowError(f"{op}: result {n} does not fit in a 64-bit integer")
    return n


def kind_name(value: Value) -> str:
    """Short name of a value's kind, used in error messages."""
    match value:
        case bool():
            return "Bool"
        case int():
            return "Number"
        case str():
            return "String"
        case tuple():
            return "Array"
        case Builtin():
            return "Builtin"
        case Closure():
            return "Closure"
    return type(value).__name__


def render(value: Value) -> str:
    """Human-readable text for a value, as printed by `print` and the CLI."""
    match value:
        case bool():
            return "true" if value else "false"
        case int() | str():
            return str(value)
        case tuple():
            return "[" + ", ".join(render(v) for v in value) + "]"
        case Builtin():
            return "<function>"
        case Closure():
            return "<lambda>"
    return str(value)
