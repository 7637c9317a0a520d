from slang import SExpression
from slang.types.environment import Environment


class TailCall:
    """Continue the evaluation loop with `expr` in `env` instead of returning."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
