"""Application engine for Arbor.

This module centralizes procedure application semantics for the interpreter:
- Builtins: declared arity is checked, then the native function is called
  with the calling environment and the evaluated arguments.
- Closures: argument count must equal parameter count; the body runs in a
  fresh child scope of the closure's captured environment.

The evaluator and the higher-order builtins (map, filter, fold) both apply
procedures through here, so they share one set of rules.
"""

from arbor import Value, EvaluatorFn
from arbor.errors import ArborArityError, ArborNotAProcedure
from arbor.types.builtin import Builtin
from arbor.types.closure import Closure
from arbor.types.environment import Environment
from arbor.types.values import kind_name, render


def apply_builtin(fn: Builtin, args: list[Value], env: Environment) -> Value:
    """Call a builtin after checking its declared arity."""
    if not fn.accepts(len(args)):
        raise ArborArityError(
            f"{fn.name} expects exactly {fn.arity} argument(s), got {len(args)}"
        )
    return fn.fn(env, args)


def apply_closure(fn: Closure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply a Closure value.

    Parameters:
    - fn: The Closure being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator used to run the body.

    Each parameter is defined in a new scope whose parent is the scope the
    closure captured when it was created, not the caller's scope.
    """
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: Value,
    args: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply either a Closure or a Builtin.

    - For Closure, defer to apply_closure.
    - For Builtin, check arity and invoke with the runtime env and list of args.
    - Otherwise, raise ArborNotAProcedure.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return apply_builtin(head, args, env)
    else:
        raise ArborNotAProcedure(
            f"Cannot apply non-procedure {render(head)} ({kind_name(head)})"
        )
