from slang import EvaluatorFn
from slang import SExpression, LispValue
from slang.errors import SlangFormError, SlangTypeError
from slang.evaluation.tail_call import TailCall
from slang.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise SlangFormError("Invalid form for if")

    predicate = evaluate_fn(tail[0], env)
    # No truthiness: the predicate must be a real boolean.
    if not isinstance(predicate, bool):
        raise SlangTypeError("If predicate must evaluate to either true or false")

    if predicate:
        return TailCall(tail[1], env)
    elif len(tail) == 3:
        return TailCall(tail[2], env)
    else:
        return False
