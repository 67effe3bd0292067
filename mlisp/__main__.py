"""mlisp command line entry point: runs one source file.

    mlisp program.mlisp
    python -m mlisp program.mlisp --show-result
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mlisp.config import get_log_level, get_recursion_limit, parse_log_level
from mlisp.interpreter import Interpreter
from mlisp.printer import render
from mlisp.types.result import Error, Value


logger = logging.getLogger("mlisp")


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlisp",
        description="Run an mlisp program. The file must hold a single root expression.",
    )
    parser.add_argument("file", help="source file to interpret")
    parser.add_argument(
        "--show-result",
        action="store_true",
        help="print the value of the root expression after it is evaluated",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (overrides MLISP_LOG_LEVEL)",
    )
    return parser


def read_source(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    level = parse_log_level(args.log_level) if args.log_level else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"mlisp: cannot read '{args.file}': {e}", file=sys.stderr)
        return 1
    logger.debug("read %d characters from %s", len(source), args.file)

    interpreter = Interpreter()
    result = interpreter.eval(source)

    if isinstance(result, Error):
        print(f"mlisp: {result.message}", file=sys.stderr)
        return 1
    if args.show_result and isinstance(result, Value):
        print(render(result.expr, interpreter.env))
    return 0


if __name__ == "__main__":
    sys.exit(main())
