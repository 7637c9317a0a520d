from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangFormError
from slang.evaluation.tail_call import TailCall
from slang.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        raise SlangFormError("Invalid form for begin")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
