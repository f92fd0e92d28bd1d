"""Builtin procedure library for Arbor.

The table is built once at import time and exposed read-only; every
environment chain created by the interpreter shares it by reference.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from arbor.types.builtin import Builtin
from arbor.builtin import arrays, higher_order, numeric, system


def build_builtin_table() -> Mapping[str, Builtin]:
    """Return a fresh read-only mapping of every builtin by name."""
    table: dict[str, Builtin] = {}
    numeric.register(table)
    arrays.register(table)
    higher_order.register(table)
    system.register(table)
    return MappingProxyType(table)


BUILTINS: Mapping[str, Builtin] = build_builtin_table()
