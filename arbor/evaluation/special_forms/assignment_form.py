from arbor import EvaluatorFn
from arbor import Value
from arbor.types.environment import Environment
from arbor.types.expression import Assignment
from arbor.evaluation.special_forms.binding import binding_name


def assignment_form(
    node: Assignment,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    name = binding_name(node.name, "Assignment")
    value = evaluate_fn(node.value, env)
    env.assign(name, value)

    return value
