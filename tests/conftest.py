import pytest

from sigma.builtin.env_builtin import standard_environment
from sigma.evaluation.evaluator import evaluate
from sigma.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with the native procedures bound."""
    return standard_environment()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in the shared `env`; return the last value."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run
