from __future__ import annotations

import logging

from mlisp.errors import LexError, ParseError
from mlisp.evaluation.evaluator import evaluate
from mlisp.reader.lexer import tokenize
from mlisp.reader.parser import parse
from mlisp.types.environment import Environment
from mlisp.types.result import EvalResult, Error


logger = logging.getLogger(__name__)


class Interpreter:
    """
    Lexes, parses and evaluates mlisp programs.
    Keeps one Environment across calls, so bindings made by one program are
    visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment.default()

    def eval(self, program: str) -> EvalResult:
        """Run one program (a single root expression) and return its result."""
        try:
            tokens = tokenize(program)
        except LexError as e:
            return Error(f"Lex error: {e}")

        try:
            expr = parse(tokens)
        except ParseError as e:
            return Error(f"Parse error: {e}")

        result = evaluate(expr, self.env)
        logger.debug("program result: %r", result)
        return result


def run_interpreter(program: str) -> EvalResult:
    """Lexes, parses, and evaluates the given program in a fresh default environment."""
    return Interpreter().eval(program)
