from arbor import EvaluatorFn
from arbor import Value
from arbor.errors import ArborSyntaxError
from arbor.types.closure import Closure
from arbor.types.environment import Environment
from arbor.types.expression import Identifier, Lambda, Parameters


def lambda_form(
    node: Lambda,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    params = node.parameters
    if not isinstance(params, Parameters):
        raise ArborSyntaxError(f"Lambda expects Parameters as its first child, got {params!r}")

    formals: list[str] = []
    for param in params.names:
        if not isinstance(param, Identifier):
            raise ArborSyntaxError(f"Lambda parameters must be Identifiers, got {param!r}")
        if param.name in formals:
            raise ArborSyntaxError(f"Duplicate lambda parameter {param.name}")
        formals.append(param.name)

    # The body stays unevaluated. Names defined after this point stay invisible.
    return Closure(tuple(formals), node.body, env.snapshot())
