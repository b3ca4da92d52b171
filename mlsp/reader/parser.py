"""
  Parser for mlsp.

Builds the tree with an explicit stack of open lists rather than recursion:
OPEN pushes a fresh list, CLOSE pops it and appends it to the list below,
every other token is appended to the list on top. When the tokens run out
exactly one list (the top level) must remain.
"""

from __future__ import annotations

import logging
from typing import Iterable

from mlsp import SExpression
from mlsp.errors import MlspParseError
from mlsp.reader.lexer import lex
from mlsp.types.symbol import Symbol
from mlsp.types.value import OPEN, CLOSE, is_int

logger = logging.getLogger(__name__)


def parse(tokens: Iterable[SExpression]) -> list[SExpression]:
    """Top-level forms built from `tokens`."""
    stack: list[list[SExpression]] = [[]]

    for token in tokens:
        if token is OPEN:
            stack.append([])
        elif token is CLOSE:
            if len(stack) == 1:
                raise MlspParseError("unmatched parenthesis: extra ')'")
            finished = stack.pop()
            stack[-1].append(finished)
        elif is_int(token) or isinstance(token, (Symbol, list)):
            stack[-1].append(token)
        else:
            raise MlspParseError(f"unrecognized token in parsing: {token!r}")

    if len(stack) != 1:
        raise MlspParseError(
            f"unmatched parenthesis: {len(stack) - 1} '(' left open"
        )

    forms = stack[0]
    logger.debug("parsed %d top-level form(s)", len(forms))
    return forms


def parse_source(text: str) -> list[SExpression]:
    """Lex and parse `text`."""
    return parse(lex(text))
