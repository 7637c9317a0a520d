"""Application engine for slang.

Centralizes procedure application for the evaluator and for built-ins that
call back into user code:
- Builtins are invoked immediately with the caller's env and the argument list.
- Closures get a fresh frame chained onto their captured environment; all body
  expressions but the last are evaluated here, and the last one is handed back
  as a TailCall so the evaluator loop runs it without growing the stack.
"""

from slang import LispValue, EvaluatorFn
from slang.errors import SlangArityError, SlangNotApplicable
from slang.evaluation.tail_call import TailCall
from slang.types.environment import Environment
from slang.types.procedure import Builtin, Closure
from slang.types.values import to_repr


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """Bind `args` to the closure's parameters and step to its final body form."""
    if len(args) != fn.arity:
        raise SlangArityError(
            f"Incorrect number of arguments to apply lambda - expected {fn.arity}, got {len(args)}"
        )

    frame = Environment(outer=fn.env)
    for param, value in zip(fn.params, args):
        frame.define(param, value)

    *leading, last = fn.body
    for expr in leading:
        evaluate_fn(expr, frame)
    return TailCall(last, frame)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """Apply either a Closure or a Builtin; anything else is not applicable."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise SlangNotApplicable(f"'{to_repr(head)}' is not applicable")
