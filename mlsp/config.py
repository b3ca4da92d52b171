from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'
# CPython's default; lower values are ignored
_MIN_RECURSION_LIMIT = 1000


def get_log_level() -> int:
    raw = os.environ.get('MLSP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('MLSP_RECURSION_LIMIT')
    if not raw or not raw.strip().isdigit():
        return None
    limit = int(raw)
    return limit if limit >= _MIN_RECURSION_LIMIT else None
