"""Convenience re-exports of Arbor's core runtime types."""

from arbor.types.environment import Environment
from arbor.types.builtin import Builtin
from arbor.types.closure import Closure
from arbor.types.expression import (
    Application,
    Assignment,
    Block,
    Clause,
    Cond,
    Expression,
    Identifier,
    Lambda,
    Let,
    Number,
    Parameters,
    String,
)
from arbor.types.values import render

__all__ = [
    "Application",
    "Assignment",
    "Block",
    "Builtin",
    "Clause",
    "Closure",
    "Cond",
    "Environment",
    "Expression",
    "Identifier",
    "Lambda",
    "Let",
    "Number",
    "Parameters",
    "String",
    "render",
]
