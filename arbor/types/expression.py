"""Expression tree for Arbor programs.

Every node is an immutable dataclass. Children are stored as tuples so a tree
can be shared freely between closures and evaluations. Nodes carry no
behaviour; structural rules (a Lambda's first child must be Parameters, a
Clause may only sit inside a Cond, ...) are enforced by the evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Application:
    """Operator expression followed by argument expressions."""
    items: tuple[Expression, ...]

    @property
    def operator(self) -> Expression:
        return self.items[0]

    @property
    def arguments(self) -> tuple[Expression, ...]:
        return self.items[1:]


@dataclass(frozen=True)
class Block:
    body: tuple[Expression, ...]


@dataclass(frozen=True)
class Clause:
    condition: Expression
    consequent: Expression


@dataclass(frozen=True)
class Cond:
    clauses: tuple[Expression, ...]


@dataclass(frozen=True)
class Parameters:
    names: tuple[Expression, ...]


@dataclass(frozen=True)
class Lambda:
    parameters: Expression
    body: Expression


@dataclass(frozen=True)
class Let:
    name: Expression
    value: Expression
    body: Expression


@dataclass(frozen=True)
class Assignment:
    name: Expression
    value: Expression


Expression = Union[
    Number,
    String,
    Identifier,
    Application,
    Block,
    Clause,
    Cond,
    Parameters,
    Lambda,
    Let,
    Assignment,
]
