import pytest

from slang import runtime_context
from slang.builtin.env_builtin import register
from slang.evaluation.evaluator import evaluate
from slang.interpreter import Interpreter
from slang.reader.parser import parse
from slang.types.environment import Environment


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running evaluation tests")


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the prelude, so tests own every definition."""
    return Interpreter(prelude=None)


@pytest.fixture
def unlimited_budget():
    # The step budget is process-global; don't leak a limit into later tests.
    yield
    runtime_context.start_budget(None)


@pytest.fixture
def run(env):
    """Parse and evaluate every expression of a source string in `env`; return the last value."""
    def _run(source: str):
        result = None
        for expr in parse(source):
            result = evaluate(expr, env)
        return result

    return _run
