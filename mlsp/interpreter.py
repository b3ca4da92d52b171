from __future__ import annotations

import logging

from mlsp import Value
from mlsp.reader.parser import parse_source
from mlsp.evaluation.evaluator import evaluate
from mlsp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates lexing, parsing and evaluating mlsp code.
    Keeps one Environment across calls to `eval`, so bindings made by one
    call are visible to the next.
    """

    def __init__(self):
        self.env: Environment = Environment()

    def eval(self, code: str) -> list[Value]:
        """Evaluate every top-level form of `code`, one result per form.

        The whole text is parsed before anything runs, so a syntax error
        evaluates nothing. Any error propagates; results of forms that
        already ran are discarded, their bindings are kept.
        """
        forms = parse_source(code)
        logger.debug("evaluating %d form(s)", len(forms))
        return [evaluate(form, self.env) for form in forms]


def run(source_text: str) -> list[Value]:
    """Evaluate `source_text` in a fresh environment."""
    return Interpreter().eval(source_text)
