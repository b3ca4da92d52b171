from mlsp import EvaluatorFn
from mlsp import SExpression, Value
from mlsp.errors import MlspInvalidSymbol, MlspArityError
from mlsp.types.symbol import Symbol
from mlsp.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) < 2:
        raise MlspArityError("set requires 2 arguments: (set var value)")
    var_sym, val_expr = tail[0], tail[1]
    if not isinstance(var_sym, Symbol):
        raise MlspInvalidSymbol(f"set first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
