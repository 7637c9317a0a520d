from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangFormError
from slang.types.environment import Environment
from slang.types.procedure import make_closure


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda [params...] body...) needs at least one body form; with several
    # the body behaves like an implicit begin.
    if len(tail) < 2:
        raise SlangFormError("Invalid number of arguments - expected at least 2 arguments")

    params, *body = tail
    return make_closure(params, body, env)
