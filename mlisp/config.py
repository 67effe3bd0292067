from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'


def value_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns a "Level x" string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_log_level() -> int:
    return parse_log_level(value_from_env('MLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL))


def get_recursion_limit() -> Optional[int]:
    """Interpreter recursion limit from MLISP_RECURSION_LIMIT, or None to keep Python's."""
    raw = value_from_env('MLISP_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None
