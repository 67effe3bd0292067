import pytest

from mlisp.evaluation.evaluator import evaluate
from mlisp.reader.lexer import tokenize
from mlisp.reader.parser import parse
from mlisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh default environment (True/False seeded)."""
    return Environment.default()


@pytest.fixture
def run(env):
    """Lex, parse and evaluate a source string in the `env` fixture."""
    def _run(source):
        return evaluate(parse(tokenize(source)), env)
    return _run
