"""Runtime variable mapping for mlsp.

A single flat mapping from Symbols to values, shared by every form of a run.
There is no nesting: `set` anywhere in a program rebinds the same table.
"""

from __future__ import annotations

from mlsp import Value
from mlsp.errors import MlspInvalidSymbol, MlspUnboundSymbol
from mlsp.types.symbol import Symbol
from mlsp.types.value import clone


class Environment:
    """Flat mapping from Symbols to values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, Value] = {}

    def set(self, name: Symbol, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any previous binding."""
        if not isinstance(name, Symbol):
            raise MlspInvalidSymbol(f"Cannot bind {name!r}, a Symbol is required")
        self.vars[name] = clone(value)

    def get(self, name: Symbol, default: Value = None) -> Value:
        """Copy of the bound value, or `default` when `name` is unbound."""
        if name in self.vars:
            return clone(self.vars[name])
        return default

    def lookup(self, name: Symbol) -> Value:
        if name not in self.vars:
            raise MlspUnboundSymbol(f"unknown symbol: {name}")
        return clone(self.vars[name])

    def __contains__(self, name: object) -> bool:
        return name in self.vars
