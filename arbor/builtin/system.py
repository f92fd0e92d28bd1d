"""Builtins with effects outside the evaluator: output and sleeping."""
from __future__ import annotations

import time

from arbor import Value
from arbor.errors import ArborDomainError
from arbor.types.builtin import Builtin
from arbor.types.environment import Environment
from arbor.types.values import render
from arbor.builtin.numeric import number_arg


def print_builtin(env: Environment, args: list[Value]) -> bool:
    """Print space-separated renderings of args followed by newline; returns false."""
    text = " ".join(render(a) for a in args)
    print(text)
    return False


def wait(env: Environment, args: list[Value]) -> bool:
    """(wait ms) blocks the calling thread for ms milliseconds; returns false."""
    ms = number_arg("wait", args[0])
    if ms < 0:
        raise ArborDomainError(f"wait expects a non-negative duration, got {ms}")
    try:
        time.sleep(ms / 1000)
    except OverflowError:
        raise ArborDomainError(f"wait: {ms} ms is longer than this platform can sleep") from None
    return False


def register(table: dict[str, Builtin]) -> None:
    """Register I/O builtins into the given table."""
    table.update(
        {
            "print": Builtin("print", None, print_builtin),
            "wait": Builtin("wait", 1, wait),
        }
    )
