"""Core evaluator for the Arbor interpreter.

A plain recursive tree walk: literals and identifiers are handled inline,
application goes through the shared apply engine, and every other node kind
is dispatched to its special-form handler. There is no trampoline, so the
depth of a program is bounded by the Python recursion limit.
"""

from __future__ import annotations

from arbor import Value
from arbor.errors import ArborSyntaxError, ArborUnboundSymbol
from arbor.runtime_context import get_strict_identifiers
from arbor.types.environment import Environment
from arbor.types.expression import (
    Application,
    Clause,
    Expression,
    Identifier,
    Number,
    Parameters,
    String,
)
from arbor.evaluation.apply import apply
from arbor.evaluation.special_forms import SPECIAL_FORMS


def resolve_identifier(name: str, env: Environment) -> Value:
    """
    Resolve a name: lexical chain first, then the builtin table.

    A name bound nowhere follows the active policy: strict mode raises,
    permissive mode lets the bare name through as a String value.
    """
    scope = env.find(name)
    if scope is not None:
        return scope.vars[name].value
    builtin = env.lookup_builtin(name)
    if builtin is not None:
        return builtin
    if get_strict_identifiers():
        raise ArborUnboundSymbol(f"Unbound variable {name}")
    return name


def evaluate(expr: Expression, env: Environment) -> Value:
    """
    Evaluate `expr` in `env` and return its value.

    Raises an ArborError subclass on the first failure; nothing is caught here.
    """
    match expr:
        case Number(value) | String(value):
            return value

        case Identifier(name):
            return resolve_identifier(name, env)

        case Application(items):
            if not items:
                raise ArborSyntaxError("Application requires an operator expression")
            head = evaluate(items[0], env)
            # Arguments are evaluated left-to-right in the caller's scope.
            args = [evaluate(arg, env) for arg in items[1:]]
            return apply(head, args, env, evaluate)

        case Clause():
            raise ArborSyntaxError("Clause is only valid inside a Cond")

        case Parameters():
            raise ArborSyntaxError("Parameters is only valid inside a Lambda")

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is None:
        raise ArborSyntaxError(f"Cannot evaluate unknown node {expr!r}")
    return handler(expr, env, evaluate)
