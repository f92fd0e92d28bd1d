from __future__ import annotations

from typing import Callable, Optional

from arbor import Value

# Native procedure signature: (calling environment, evaluated arguments) -> value
NativeFn = Callable[..., Value]


class Builtin:
    """A native procedure with a declared arity.

    An arity of None marks a variadic builtin. Arity is checked by the
    evaluator before `fn` is called, so implementations may index their
    argument list directly.
    """

    __slots__ = ("name", "arity", "fn")

    def __init__(self, name: str, arity: Optional[int], fn: NativeFn):
        self.name = name
        self.arity = arity
        self.fn = fn

    def accepts(self, count: int) -> bool:
        return self.arity is None or self.arity == count

    def __repr__(self) -> str:
        arity = "*" if self.arity is None else self.arity
        return f"<builtin {self.name}/{arity}>"
