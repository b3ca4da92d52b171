"""Runtime values other than symbols, plus helpers shared by every stage.

Int is a plain Python int kept inside the signed 32-bit range, List is a
Python list. Booleans and the two structural markers get their own
singleton types so they never compare equal to integers.
"""

from __future__ import annotations

from mlsp import Value
from mlsp.types.symbol import Symbol

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class Boolean:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self):
        return "True" if self.value else "False"

    def __bool__(self):
        return self.value


class Marker:
    """Open/Close parenthesis token. Only meaningful while lexing and parsing."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    # Identity equality: Open == Open, Close == Close, Open != Close.

    def __repr__(self):
        return self.name


TRUE = Boolean(True)
FALSE = Boolean(False)

OPEN = Marker("Open")
CLOSE = Marker("Close")


def to_boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def is_int(value: Value) -> bool:
    # bool subclasses int; it is never a valid Int
    return type(value) is int


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def clone(value: Value) -> Value:
    """Independent copy of `value`. Atoms are immutable and returned as-is."""
    if isinstance(value, list):
        return [clone(v) for v in value]
    return value


def debug_repr(value: Value) -> str:
    """Debug representation, e.g. Int(5), Symbol("i"), List([Int(1), True])."""
    if is_int(value):
        return f"Int({value})"
    if isinstance(value, Symbol):
        return f'Symbol("{value.id}")'
    if isinstance(value, list):
        return f"List([{', '.join(debug_repr(v) for v in value)}])"
    if isinstance(value, (Boolean, Marker)):
        return repr(value)
    raise TypeError(f"not an mlsp value: {value!r}")
