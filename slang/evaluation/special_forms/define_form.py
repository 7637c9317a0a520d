from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangFormError, SlangTypeError
from slang.types.environment import Environment
from slang.types.procedure import make_closure
from slang.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define name [params...] body...)   ; sugar for (define name (lambda [params...] body...))

    Binds in the current frame only and returns the bound value.
    """
    if len(tail) < 2:
        raise SlangFormError("Invalid form for define")

    name, *rest = tail
    if not isinstance(name, Symbol):
        raise SlangTypeError("First argument must be a symbol")

    if len(rest) == 1:
        value = evaluate_fn(rest[0], env)
    else:
        params, *body = rest
        value = make_closure(params, body, env)

    return env.define(name, value)
