"""Arithmetic and ordering semantics for mlsp values.

Arithmetic is defined only between two Ints and faults on 32-bit overflow.
Ordering is defined between two Ints or two Symbols (by name).
Equality is structural over every value and never fails.
"""

from __future__ import annotations

from mlsp import Value
from mlsp.errors import MlspTypeError, MlspOverflowError
from mlsp.types.symbol import Symbol
from mlsp.types.value import Boolean, is_int, in_int_range, to_boolean


def _checked(op: str, lhs: Value, rhs: Value, result: int) -> int:
    if not in_int_range(result):
        raise MlspOverflowError(f"integer overflow in ({op} {lhs} {rhs})")
    return result


def add(lhs: Value, rhs: Value) -> int:
    if not (is_int(lhs) and is_int(rhs)):
        raise MlspTypeError("you can add only integers")
    return _checked("+", lhs, rhs, rhs + lhs)


def subtract(lhs: Value, rhs: Value) -> int:
    if not (is_int(lhs) and is_int(rhs)):
        raise MlspTypeError("you can subtract only integers")
    return _checked("-", lhs, rhs, lhs - rhs)


def multiply(lhs: Value, rhs: Value) -> int:
    if not (is_int(lhs) and is_int(rhs)):
        raise MlspTypeError("you can multiply only integers")
    return _checked("*", lhs, rhs, rhs * lhs)


def _comparable(lhs: Value, rhs: Value) -> None:
    if is_int(lhs) and is_int(rhs):
        return
    if isinstance(lhs, Symbol) and isinstance(rhs, Symbol):
        return
    raise MlspTypeError("comparison works only for numbers and symbols")


def greater(lhs: Value, rhs: Value) -> Boolean:
    _comparable(lhs, rhs)
    return to_boolean(lhs > rhs)


def less(lhs: Value, rhs: Value) -> Boolean:
    _comparable(lhs, rhs)
    return to_boolean(lhs < rhs)


def equal(lhs: Value, rhs: Value) -> Boolean:
    # Structural: lists element-wise, mixed kinds are simply unequal
    return to_boolean(lhs == rhs)
