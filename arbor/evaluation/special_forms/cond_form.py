"""Special form: cond.

Clauses are tried in order. Only an explicit Bool true selects a clause; any
other condition value, including numbers and strings, counts as false.
"""

from arbor import EvaluatorFn
from arbor import Value
from arbor.errors import ArborNoMatchingClause, ArborSyntaxError
from arbor.types.environment import Environment
from arbor.types.expression import Clause, Cond


def cond_form(
    node: Cond,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    for clause in node.clauses:
        if not isinstance(clause, Clause):
            raise ArborSyntaxError(f"Cond expects Clause children, got {clause!r}")
        if evaluate_fn(clause.condition, env) is True:
            return evaluate_fn(clause.consequent, env)
    raise ArborNoMatchingClause("No clause of cond has a true condition")
