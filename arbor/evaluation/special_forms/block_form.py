from arbor import EvaluatorFn
from arbor import Value
from arbor.types.environment import Environment
from arbor.types.expression import Block


def block_form(
    node: Block,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # Bindings made inside the block die with its scope
    scope = env.new_child()
    result: Value = False  # an empty block evaluates to false
    for e in node.body:
        result = evaluate_fn(e, scope)
    return result
