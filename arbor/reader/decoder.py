"""
  JSON reader for Arbor expression trees.

Programs arrive already parsed, as an externally tagged JSON document: every
node is an object with exactly one key naming its kind.

    - {"Number": 5}                          -> Number(5)
    - {"String": "hi"}                       -> String("hi")
    - {"Identifier": "x"}                    -> Identifier("x")
    - {"Application": [op, arg, ...]}        -> Application((op, arg, ...))
    - {"Block": [e, ...]}                    -> Block((e, ...))
    - {"Cond": [clause, ...]}                -> Cond((clause, ...))
    - {"Clause": [condition, consequent]}    -> Clause(condition, consequent)
    - {"Parameters": [identifier, ...]}      -> Parameters((identifier, ...))
    - {"Lambda": [parameters, body]}         -> Lambda(parameters, body)
    - {"Let": [name, value, body]}           -> Let(name, value, body)
    - {"Assignment": [name, value]}          -> Assignment(name, value)

The tag spelling is a compatibility contract with existing AST producers.
Only the document shape is checked here; whether a Clause sits inside a Cond
and the like is left to the evaluator.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from arbor.errors import ArborReadError
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
from arbor.types.values import in_int64_range


def _children(tag: str, payload: Any, count: int | None = None) -> tuple[Expression, ...]:
    if not isinstance(payload, list):
        raise ArborReadError(f"{tag} expects a JSON array, got {type(payload).__name__}")
    if count is not None and len(payload) != count:
        raise ArborReadError(f"{tag} expects exactly {count} children, got {len(payload)}")
    return tuple(decode(child) for child in payload)


def _number(payload: Any) -> Number:
    if isinstance(payload, bool) or not isinstance(payload, int):
        raise ArborReadError(f"Number expects an integer, got {payload!r}")
    if not in_int64_range(payload):
        raise ArborReadError(f"Number {payload} does not fit in a 64-bit integer")
    return Number(payload)


def _text(tag: str, payload: Any) -> str:
    if not isinstance(payload, str):
        raise ArborReadError(f"{tag} expects a string, got {payload!r}")
    return payload


NODE_READERS: dict[str, Callable[[Any], Expression]] = {
    "Number": _number,
    "String": lambda p: String(_text("String", p)),
    "Identifier": lambda p: Identifier(_text("Identifier", p)),
    "Application": lambda p: Application(_children("Application", p)),
    "Block": lambda p: Block(_children("Block", p)),
    "Cond": lambda p: Cond(_children("Cond", p)),
    "Clause": lambda p: Clause(*_children("Clause", p, 2)),
    "Parameters": lambda p: Parameters(_children("Parameters", p)),
    "Lambda": lambda p: Lambda(*_children("Lambda", p, 2)),
    "Let": lambda p: Let(*_children("Let", p, 3)),
    "Assignment": lambda p: Assignment(*_children("Assignment", p, 2)),
}


def decode(document: Any) -> Expression:
    """Build an expression tree from an already-loaded JSON value."""
    if not isinstance(document, dict) or len(document) != 1:
        raise ArborReadError(f"Expected an object with a single node tag, got {document!r}")
    ((tag, payload),) = document.items()
    reader = NODE_READERS.get(tag)
    if reader is None:
        raise ArborReadError(f"Unknown node tag {tag!r}")
    return reader(payload)


def loads(text: str) -> Expression:
    """Parse JSON text into an expression tree."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ArborReadError(f"Invalid JSON: {e}") from e
    return decode(document)


def encode(expr: Expression) -> dict[str, Any]:
    """Inverse of decode: the JSON-ready document for an expression tree."""
    match expr:
        case Number(value):
            return {"Number": value}
        case String(value):
            return {"String": value}
        case Identifier(name):
            return {"Identifier": name}
        case Application(items):
            return {"Application": [encode(e) for e in items]}
        case Block(body):
            return {"Block": [encode(e) for e in body]}
        case Cond(clauses):
            return {"Cond": [encode(e) for e in clauses]}
        case Clause(condition, consequent):
            return {"Clause": [encode(condition), encode(consequent)]}
        case Parameters(names):
            return {"Parameters": [encode(e) for e in names]}
        case Lambda(parameters, body):
            return {"Lambda": [encode(parameters), encode(body)]}
        case Let(name, value, body):
            return {"Let": [encode(name), encode(value), encode(body)]}
        case Assignment(name, value):
            return {"Assignment": [encode(name), encode(value)]}
    raise ArborReadError(f"Cannot encode {expr!r}")


def dumps(expr: Expression) -> str:
    return json.dumps(encode(expr))
