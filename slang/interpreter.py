from __future__ import annotations

import logging
from typing import Iterable, Literal

from slang import LispValue
from slang import config
from slang import runtime_context
from slang.builtin.env_builtin import register
from slang.evaluation.evaluator import evaluate
from slang.reader.parser import parse
from slang.types.environment import Environment, define_program_arguments, make_root_environment
from slang.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating slang code.
    Maintains a root Environment across calls, populated with the builtins,
    the program arguments (*ARGV*, *NARG*) and the prelude.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        argv: Iterable[str] = (),
        max_steps: int | None = None,
    ):
        self.env: Environment = make_root_environment()
        register(self.env)
        define_program_arguments(self.env, argv)
        self.max_steps = max_steps if max_steps is not None else config.get_max_steps()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_path()
            if path.is_file():
                logger.debug("Loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding='utf-8'))
            else:
                logger.debug("No prelude found at %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def evaluate(self, expr) -> LispValue:
        """Evaluate one parsed top-level expression under a fresh step budget."""
        runtime_context.start_budget(self.max_steps)
        logger.debug("Evaluating %s", expr)
        return evaluate(expr, self.env)

    def eval_prelude(self, code: str) -> None:
        for expr in parse(code):
            self.evaluate(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code`; return the last value, or nil if there is none.

        The whole of `code` is read first, so a syntax error evaluates nothing.
        """
        result: LispValue = Nil
        for expr in parse(code):
            result = self.evaluate(expr)
        return result
