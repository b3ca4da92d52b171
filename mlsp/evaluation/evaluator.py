"""Tree-walking evaluator for mlsp.

Reduces one node to one value against the shared Environment. Lists dispatch
on their head symbol: special forms first, then binary operators, then a
variable lookup.
"""

from __future__ import annotations

import logging

from mlsp import SExpression, Value
from mlsp.errors import MlspArityError, MlspStructureError
from mlsp.builtin.operators import OPERATORS
from mlsp.evaluation.special_forms import SPECIAL_FORMS
from mlsp.types.environment import Environment
from mlsp.types.symbol import Symbol
from mlsp.types.value import Marker

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> Value:
    match expr:
        case Marker():
            raise MlspStructureError(f"{expr!r} token in the tree makes no sense")

        case Symbol():
            # Unbound symbols in value position evaluate to themselves.
            return env.get(expr, expr)

        case []:
            raise MlspStructureError("can't evaluate an empty list")

        case [Symbol() as head, *tail]:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("dispatch %s with %d operand(s)", head, len(tail))

            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)

            if head in OPERATORS:
                if len(tail) < 2:
                    raise MlspArityError(f"{head} requires 2 arguments")
                lhs = evaluate(tail[0], env)
                rhs = evaluate(tail[1], env)
                return OPERATORS[head](lhs, rhs)

            # Unlike value position, an unbound head is an error.
            return env.lookup(head)

        case [head, *_]:
            raise MlspStructureError(
                f"can't evaluate list, first item needs to be a symbol, got {head!r}"
            )

    # --- Ints and Booleans are self-evaluating ---
    return expr
