"""Core evaluator for the slang interpreter.

`evaluate` is a loop over the pair (current expression, current environment):
special forms and closure application hand back a TailCall instead of
recursing, so the loop simply continues with the new pair. Only non-tail
positions (operands, `if` predicates, non-final body forms) recurse.
"""

from __future__ import annotations

from slang import SExpression, LispValue
from slang.errors import SlangNotApplicable, SlangRecursionError
from slang.evaluation.apply import apply
from slang.evaluation.special_forms import SPECIAL_FORMS
from slang.evaluation.tail_call import TailCall
from slang.runtime_context import tick
from slang.types.environment import Environment
from slang.types.sequence import List, Vector
from slang.types.symbol import Symbol
from slang.types.values import to_repr


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one parsed expression in `env`.

    Tail positions run in constant stack space; nesting in non-tail positions
    is bounded by the host recursion limit and reported as SlangRecursionError.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise SlangRecursionError("Maximum nesting depth exceeded") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    while True:
        tick()

        if not isinstance(expr, List):
            return evaluate_atom(expr, env)

        # The empty list is self-quoting.
        if len(expr) == 0:
            return expr

        head = expr.first()
        match head:
            case Symbol() if head in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head](list(expr)[1:], env, evaluate0)
            case Symbol() | List():
                values = [evaluate0(item, env) for item in expr]
                result = apply(values[0], values[1:], env, evaluate0)
            case _:
                raise SlangNotApplicable(f"'{to_repr(head)}' is not applicable")

        if isinstance(result, TailCall):
            expr, env = result.expr, result.env
            continue
        return result


def evaluate_atom(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Vector():
            return Vector([evaluate0(item, env) for item in expr])
        case Symbol():
            return env.lookup(expr)
    # --- Everything else is self-evaluating ---
    return expr


def call_procedure(proc: LispValue, args: list[LispValue], env: Environment) -> LispValue:
    """Apply `proc` to already-evaluated `args` and run it to completion.

    Used by host code (built-ins, the interpreter) that needs a final value
    rather than a TailCall.
    """
    result = apply(proc, list(args), env, evaluate0)
    if isinstance(result, TailCall):
        return evaluate0(result.expr, result.env)
    return result
