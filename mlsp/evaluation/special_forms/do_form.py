from mlsp import EvaluatorFn
from mlsp import SExpression, Value
from mlsp.types.environment import Environment


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    return [evaluate_fn(e, env) for e in tail]
