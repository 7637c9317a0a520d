from slang import SExpression, LispValue, EvaluatorFn
from slang.errors import SlangFormError
from slang.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SlangFormError("Invalid number of arguments - expected 1 argument")
    return tail[0]
