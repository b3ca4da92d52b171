"""Binary operators available in call position.

Both operands are evaluated (left, then right) before the operator is applied.
"""

from __future__ import annotations

from typing import Callable

from mlsp import Value
from mlsp.types.symbol import Symbol
from mlsp.types import arithmetic

OPERATORS: dict[Symbol, Callable[[Value, Value], Value]] = {
    Symbol("+"): arithmetic.add,
    Symbol("-"): arithmetic.subtract,
    Symbol("*"): arithmetic.multiply,
    Symbol(">"): arithmetic.greater,
    Symbol("<"): arithmetic.less,
    Symbol("="): arithmetic.equal,
}
