import pytest

from minilisp.builtin.env_builtin import make_global_environment
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return make_global_environment()


@pytest.fixture
def run(env):
    """Parse one expression and evaluate it in the test's global environment."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
