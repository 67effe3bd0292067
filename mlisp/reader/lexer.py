"""
  mlisp lexer

Splits source text into parenthesis tokens and literals:

    - "(" -> Token("lparen", "(")
    - ")" -> Token("rparen", ")")
    - any maximal run of non-space, non-paren characters -> Token("literal", text)

Deciding whether a literal is a number or a symbol is left to the parser.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple

from mlisp.errors import LexError


logger = logging.getLogger(__name__)

LPAREN = "lparen"
RPAREN = "rparen"
LITERAL = "literal"


class Token(NamedTuple):
    kind: str
    text: str


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<literal>[^\s()]+)"
    r")"
)


def _check_printable(text: str, offset: int) -> None:
    for i, ch in enumerate(text):
        if not ch.isprintable():
            raise LexError(ch, offset + i)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text) tuples.

    Raises LexError on characters that are neither whitespace nor printable.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only trailing whitespace is left
            break
        for kind in (LPAREN, RPAREN, LITERAL):
            text = m.group(kind)
            if text is not None:
                if kind == LITERAL:
                    _check_printable(text, m.start(kind))
                yield Token(kind, text)
                break
        pos = m.end()


def tokenize(source: str) -> list[Token]:
    """Eagerly lex the whole source."""
    tokens = list(lex(source))
    logger.debug("lexed %d tokens", len(tokens))
    return tokens
