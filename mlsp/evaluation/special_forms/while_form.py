from mlsp import EvaluatorFn
from mlsp import SExpression, Value
from mlsp.errors import MlspArityError
from mlsp.types.environment import Environment
from mlsp.types.value import TRUE, FALSE


def while_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Run the body while the condition is TRUE; result of the last pass, or FALSE."""
    if len(tail) < 2:
        raise MlspArityError("while requires a condition and a body")
    cond, body = tail[0], tail[1]

    result: Value = FALSE
    while evaluate_fn(cond, env) is TRUE:
        result = evaluate_fn(body, env)
    return result
