"""
  mlisp recursive-descent parser

Grammar:

    expr := NUMBER | SYMBOL | '(' expr* ')'

Emits plain Python values:

    - numbers -> float
    - symbols -> Symbol
    - lists   -> tuple

A program is exactly one root expression. `parse` returns the first complete
expression and ignores whatever tokens follow it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from mlisp import Expr
from mlisp.errors import BadParse, ParseEOF, ParseError
from mlisp.reader.lexer import Token, LPAREN, RPAREN, LITERAL
from mlisp.types.symbol import Symbol


logger = logging.getLogger(__name__)

UNCLOSED_DELIMITER = "Unclosed delimiter"
UNEXPECTED_RPAREN = "Unexpected ) encountered."
NESTED_TOO_DEEPLY = "expression nested too deeply"


def parse_atom(text: str) -> Expr:
    """A literal that reads as a 64-bit float is a number, anything else a symbol."""
    # float() accepts digit-group underscores ("1_000"); those stay symbols
    if "_" not in text:
        try:
            return float(text)
        except ValueError:
            pass
    return Symbol(text)


class TokenStream:
    """Cursor over a token sequence."""

    def __init__(self, tokens: Sequence[Token], position: int = 0):
        self.tokens = tokens
        self.position = position

    def peek(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.position += 1
        return tok

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def parse_expr(self) -> Expr:
        """Parse one expression at the cursor and move past it."""
        tok = self.peek()
        if tok is None:
            raise ParseEOF()

        kind, text = tok
        if kind == RPAREN:
            raise BadParse(UNEXPECTED_RPAREN)

        if kind == LITERAL:
            self.advance()
            return parse_atom(text)

        if kind == LPAREN:
            self.advance()
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise BadParse(UNCLOSED_DELIMITER)
                if nxt.kind == RPAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return tuple(items)

        raise BadParse(f"Unknown token: {tok!r}")


@dataclass(frozen=True)
class ParseSuccess:
    next_index: int
    expr: Expr


@dataclass(frozen=True)
class ParseFailure:
    error: ParseError


ParseResult = Union[ParseSuccess, ParseFailure]


def parse_at(tokens: Sequence[Token], index: int) -> ParseResult:
    """Parse one expression starting at `index`, reporting where it ended."""
    stream = TokenStream(tokens, index)
    try:
        expr = stream.parse_expr()
    except ParseError as e:
        return ParseFailure(e)
    except RecursionError:
        return ParseFailure(BadParse(NESTED_TOO_DEEPLY))
    return ParseSuccess(stream.position, expr)


def parse(tokens: Sequence[Token]) -> Expr:
    """Parse the root expression at index 0.

    Raises ParseError (BadParse or ParseEOF). Trailing tokens are discarded.
    """
    result = parse_at(tokens, 0)
    if isinstance(result, ParseFailure):
        raise result.error
    if result.next_index < len(tokens):
        logger.debug(
            "discarding %d tokens after the root expression",
            len(tokens) - result.next_index,
        )
    return result.expr
