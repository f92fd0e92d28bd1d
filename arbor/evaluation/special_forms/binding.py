from arbor.errors import ArborSyntaxError
from arbor.types.expression import Expression, Identifier


def binding_name(node: Expression, form: str) -> str:
    """Name carried by an Identifier in a binding position of `form`."""
    if not isinstance(node, Identifier):
        raise ArborSyntaxError(f"{form} expects an Identifier as the variable name, got {node!r}")
    return node.name
