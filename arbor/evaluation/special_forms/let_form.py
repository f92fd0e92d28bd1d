from arbor import EvaluatorFn
from arbor import Value
from arbor.types.environment import Environment
from arbor.types.expression import Let
from arbor.evaluation.special_forms.binding import binding_name


def let_form(
    node: Let,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    Let(name, value, body)
    The value is evaluated before the name is bound, so it cannot refer to itself.
    """
    name = binding_name(node.name, "Let")
    value = evaluate_fn(node.value, env)
    env.define(name, value)
    return evaluate_fn(node.body, env)
