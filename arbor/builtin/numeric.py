"""Arithmetic and comparison builtins.

Every procedure here works on Numbers only: a Bool, String, Array or
procedure operand raises ArborTypeError. Results are kept within the signed
64-bit range; anything that would leave it raises ArborOverflowError.
"""
from __future__ import annotations

import math

from arbor import Value
from arbor.errors import ArborDivisionByZero, ArborDomainError, ArborTypeError, ArborOverflowError
from arbor.types.builtin import Builtin
from arbor.types.environment import Environment
from arbor.types.values import checked_int64, is_number, kind_name, render


def number_arg(name: str, value: Value) -> int:
    """Return `value` if it is a Number, else raise ArborTypeError."""
    if not is_number(value):
        raise ArborTypeError(f"{name} expects Number arguments, got {kind_name(value)} {render(value)}")
    return value


def _numbers(name: str, args: list[Value]) -> list[int]:
    return [number_arg(name, a) for a in args]


def trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Value]) -> int:
    a, b = _numbers("add", args)
    return checked_int64(a + b, "add")


def sub(env: Environment, args: list[Value]) -> int:
    a, b = _numbers("sub", args)
    return checked_int64(a - b, "sub")


def mul(env: Environment, args: list[Value]) -> int:
    a, b = _numbers("mul", args)
    return checked_int64(a * b, "mul")


def div(env: Environment, args: list[Value]) -> int:
    """(div a b): quotient truncated toward zero."""
    a, b = _numbers("div", args)
    if b == 0:
        raise ArborDivisionByZero("Division by zero")
    return checked_int64(trunc_div(a, b), "div")


def mod(env: Environment, args: list[Value]) -> int:
    """(mod a b): remainder with the sign of the dividend."""
    a, b = _numbers("mod", args)
    if b == 0:
        raise ArborDivisionByZero("Modulo by zero")
    return a - b * trunc_div(a, b)


def pow_(env: Environment, args: list[Value]) -> int:
    base, exponent = _numbers("pow", args)
    if exponent < 0:
        raise ArborDomainError(f"pow expects a non-negative exponent, got {exponent}")
    # Any |base| >= 2 overflows well before exponent 64
    if abs(base) > 1 and exponent >= 64:
        raise ArborOverflowError(f"pow: {base}^{exponent} does not fit in a 64-bit integer")
    return checked_int64(base ** exponent, "pow")


def abs_(env: Environment, args: list[Value]) -> int:
    (n,) = _numbers("abs", args)
    return checked_int64(abs(n), "abs")


def max_(env: Environment, args: list[Value]) -> int:
    return max(_numbers("max", args))


def min_(env: Environment, args: list[Value]) -> int:
    return min(_numbers("min", args))


def fact(env: Environment, args: list[Value]) -> int:
    (n,) = _numbers("fact", args)
    if n < 0:
        raise ArborDomainError(f"fact is undefined for negative numbers, got {n}")
    if n > 20:  # 21! > 2**63 - 1
        raise ArborOverflowError(f"fact: {n}! does not fit in a 64-bit integer")
    return math.factorial(n)


# -------------------------------
# Comparison
# -------------------------------
def eq(env: Environment, args: list[Value]) -> bool:
    a, b = _numbers("eq", args)
    return a == b


def lt(env: Environment, args: list[Value]) -> bool:
    a, b = _numbers("<", args)
    return a < b


def gt(env: Environment, args: list[Value]) -> bool:
    a, b = _numbers(">", args)
    return a > b


def lte(env: Environment, args: list[Value]) -> bool:
    a, b = _numbers("<=", args)
    return a <= b


def gte(env: Environment, args: list[Value]) -> bool:
    a, b = _numbers(">=", args)
    return a >= b


def is_zero(env: Environment, args: list[Value]) -> bool:
    (n,) = _numbers("zero?", args)
    return n == 0


def register(table: dict[str, Builtin]) -> None:
    """Register arithmetic and comparison builtins into the given table."""
    table.update(
        {
            "add": Builtin("add", 2, add),
            "sub": Builtin("sub", 2, sub),
            "mul": Builtin("mul", 2, mul),
            "div": Builtin("div", 2, div),
            "mod": Builtin("mod", 2, mod),
            "pow": Builtin("pow", 2, pow_),
            "abs": Builtin("abs", 1, abs_),
            "max": Builtin("max", 2, max_),
            "min": Builtin("min", 2, min_),
            "fact": Builtin("fact", 1, fact),
            "eq": Builtin("eq", 2, eq),
            "<": Builtin("<", 2, lt),
            ">": Builtin(">", 2, gt),
            "<=": Builtin("<=", 2, lte),
            ">=": Builtin(">=", 2, gte),
            "zero?": Builtin("zero?", 1, is_zero),
        }
    )
