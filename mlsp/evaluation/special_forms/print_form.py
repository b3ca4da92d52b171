from mlsp import EvaluatorFn
from mlsp import SExpression, Value
from mlsp.errors import MlspArityError
from mlsp.runtime_context import get_output
from mlsp.types.environment import Environment
from mlsp.types.value import debug_repr


def print_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if not tail:
        raise MlspArityError("print requires 1 argument")
    value = evaluate_fn(tail[0], env)
    print(debug_repr(value), file=get_output())
    return value
