from mlsp import EvaluatorFn
from mlsp import SExpression, Value
from mlsp.errors import MlspArityError
from mlsp.types.environment import Environment
from mlsp.types.value import TRUE


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) < 3:
        raise MlspArityError("if requires a condition, a then-expression and an else-expression")

    # Only TRUE selects the then-branch; any other value takes the else-branch
    if evaluate_fn(tail[0], env) is TRUE:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
