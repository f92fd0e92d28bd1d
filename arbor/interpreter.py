from __future__ import annotations

import logging
from typing import Mapping, Optional

from arbor import Value
from arbor.config import INITIAL_BINDINGS
from arbor.builtin import BUILTINS
from arbor.evaluation.evaluator import evaluate
from arbor.reader.decoder import loads
from arbor.types.environment import Environment
from arbor.types.expression import Expression
from arbor.types.values import render

logger = logging.getLogger(__name__)


def global_environment(bindings: Optional[Mapping[str, Value]] = None) -> Environment:
    """Fresh top-level scope: the builtin table plus the initial bindings."""
    env = Environment(builtins=BUILTINS)
    env.update(INITIAL_BINDINGS if bindings is None else bindings)
    return env


class Interpreter:
    """
    Evaluates Arbor expression trees against a persistent top-level scope.

    Each Interpreter owns its own Environment, so bindings made by one
    evaluation (for example a top-level Let) are visible to the next one.
    Use a new Interpreter for an independent run.
    """

    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self.env: Environment = global_environment(bindings)

    def eval(self, expr: Expression) -> Value:
        return evaluate(expr, self.env)

    def eval_json(self, text: str) -> Value:
        """Decode a JSON document and evaluate the tree it describes."""
        expr = loads(text)
        logger.debug("decoded expression: %r", expr)
        return self.eval(expr)

    def run(self, text: str) -> str:
        """Evaluate a JSON document and return the rendered result."""
        result = render(self.eval_json(text))
        logger.debug("evaluation produced: %s", result)
        logger.debug("top-level scope after run: %r", self.env)
        return result
