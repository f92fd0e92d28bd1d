"""Closure representation and argument binding for Arbor."""

from __future__ import annotations

from io import StringIO

from arbor import Value
from arbor.errors import ArborArityError
from arbor.types.environment import Environment
from arbor.types.expression import Expression


class Closure:
    """A first-class procedure with formal parameters, body, and defining scope."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: tuple[str, ...], body: Expression, env: Environment):
        self.formals: tuple[str, ...] = formals
        self.body: Expression = body
        # A snapshot of the defining chain: it shares binding cells with it.
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (")
            buffer.write(" ".join(self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def extend_env(self, args: list[Value]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new child scope of the captured environment for the body.

        The caller's environment plays no part: scoping is strictly lexical.
        """
        if len(args) != len(self.formals):
            raise ArborArityError(
                f"Closure expects {len(self.formals)} argument(s), got {len(args)}"
            )
        frame = self.env.new_child()
        for name, value in zip(self.formals, args):
            frame.define(name, value)
        return frame
