# Core type aliases for the mlsp data model.
# Values are plain Python objects: int for Int, list for List, plus the
# Symbol, Boolean and Marker types defined under mlsp.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - Value: use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms and values share one representation
SExpression = Value

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., Value]
