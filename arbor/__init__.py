# Core type aliases for Arbor's data model.
# Expressions are frozen dataclasses (see arbor.types.expression). Runtime values
# use plain Python types where one fits: int for Number, bool for Bool, str for
# String and tuple for Array. Procedures are Builtin and Closure instances.
#
# Naming guidance:
# - Expression: use in reader/evaluator code to denote syntax tree nodes.
# - Value:      use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Evaluator function type passed to special forms and higher-order builtins
EvaluatorFn = Callable[..., Value]
