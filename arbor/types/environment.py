"""Runtime environment for Arbor.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Each binding is a mutable `Binding` cell:
`define` always makes a new cell, `assign` writes into an existing one.
Closures capture a `snapshot` of the chain, which shares the cells but not
the name tables, so they observe later assignments but not later definitions.

Builtin procedures live in a separate flat table shared by reference across
the whole chain; they are consulted only after ordinary lexical lookup fails.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Optional

from arbor import Value
from arbor.errors import ArborUnboundSymbol

if TYPE_CHECKING:
    from arbor.types.builtin import Builtin

_NO_BUILTINS: Mapping[str, "Builtin"] = MappingProxyType({})


class Binding:
    """Mutable cell holding the value of one variable."""

    __slots__ = ("value",)

    def __init__(self, value: Value):
        self.value: Value = value

    def __repr__(self) -> str:
        return f"Binding({self.value!r})"


class Environment:
    """Hierarchical mapping from names to binding cells with a shared builtin table."""

    __slots__ = ("vars", "outer", "builtins")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        builtins: Optional[Mapping[str, "Builtin"]] = None,
    ):
        self.vars: dict[str, Binding] = {}
        self.outer: Environment | None = outer
        # Children share their parent's table unless one is given explicitly
        if builtins is None:
            builtins = outer.builtins if outer is not None else _NO_BUILTINS
        self.builtins: Mapping[str, "Builtin"] = builtins

    def new_child(self) -> Environment:
        """Create an empty scope whose parent is this one."""
        return Environment(outer=self)

    def snapshot(self) -> Environment:
        """
        Copy the whole chain, frame by frame, sharing every binding cell.

        Assignments made through the original chain stay visible in the copy.
        Names defined in the original after the copy is taken are not.
        """
        frames = list(self._frames())
        copy: Optional[Environment] = None
        for frame in reversed(frames):
            copy = Environment(outer=copy, builtins=frame.builtins)
            copy.vars = dict(frame.vars)
        return copy

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this scope only, in a fresh cell.

        An existing binding in this scope is replaced, not written through;
        a binding of the same name in an outer scope is shadowed, not touched.
        """
        self.vars[name] = Binding(value)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        for env in self._frames():
            if name in env.vars:
                return env
        return None

    def assign(self, name: str, value: Value) -> None:
        """Update an existing binding for `name` where it was introduced.

        Raises ArborUnboundSymbol if no scope in the chain binds `name`.
        """
        env = self.find(name)
        if env is None:
            raise ArborUnboundSymbol(f"Cannot assign to unbound variable {name}")
        env.vars[name].value = value

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name` in the lexical chain.

        Raises ArborUnboundSymbol if not found. Builtins are not consulted.
        """
        env = self.find(name)
        if env is None:
            raise ArborUnboundSymbol(f"Cannot lookup unbound variable {name}")
        return env.vars[name].value

    def lookup_builtin(self, name: str) -> Optional["Builtin"]:
        """Return the builtin procedure called `name`, or None."""
        return self.builtins.get(name)

    def update(self, mapping: Mapping[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def values(self) -> dict[str, Value]:
        """Plain name -> value view of this frame only."""
        return {k: b.value for k, b in self.vars.items()}

    def _frames(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __repr__(self) -> str:
        return f"<Environment depth={sum(1 for _ in self._frames())} names={sorted(self.vars)}>"
