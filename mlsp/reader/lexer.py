"""
  Lexer for mlsp source text.

- Lazy: tokens are produced one at a time as the iterator is advanced
- Emits the runtime values directly:

    - (            -> OPEN
    - )            -> CLOSE
    - [+-]?[0-9]+  -> int (signed 32-bit)
    - symbols      -> Symbol
    - whitespace and newlines are skipped; newlines bump the line counter

 Rules are tried in order. A sign followed by digits is always a number,
 so `-2` is Int(-2) while `- 2` is Symbol("-") then Int(2).
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from mlsp import SExpression
from mlsp.errors import MlspLexError
from mlsp.types.symbol import Symbol
from mlsp.types.value import OPEN, CLOSE, in_int_range

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<open>\()"
    r"|(?P<close>\))"
    r"|(?P<int>[+\-]?[0-9]+)"
    r"|(?P<symbol>[+\-*><=a-zA-Z][a-zA-Z0-9]*)"
    r"|(?P<newline>\n)"
    r"|(?P<whitespace>[^\S\n]+)"
)


class Lexer:
    """Forward-only token iterator over a source string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1

    def __iter__(self) -> Iterator[SExpression]:
        return self

    def __next__(self) -> SExpression:
        n = len(self.text)
        while self.pos < n:
            m = TOKEN_RE.match(self.text, self.pos)
            if not m:
                raise MlspLexError("unrecognized symbol", self.line, self.pos)
            kind = m.lastgroup
            start, self.pos = self.pos, m.end()

            if kind == "newline":
                self.line += 1
                continue
            if kind == "whitespace":
                continue

            if kind == "open":
                token = OPEN
            elif kind == "close":
                token = CLOSE
            elif kind == "int":
                token = int(m.group(kind))
                if not in_int_range(token):
                    raise MlspLexError(
                        f"integer literal {m.group(kind)} out of range", self.line, start
                    )
            else:
                token = Symbol(m.group(kind))

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("line %d pos %d: %r", self.line, start, token)
            return token
        raise StopIteration


def lex(text: str) -> Lexer:
    """Token iterator for `text`."""
    return Lexer(text)
