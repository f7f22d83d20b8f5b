"""
debug_trace.py

Category-filtered debug tracing for the render pipeline and UI actions.

Trace lines go to the ``chartsketch.trace`` logger, which writes to stderr
and to ``chartsketch_debug.log``. The CHARTSKETCH_TRACE environment variable
selects what is traced:

    CHARTSKETCH_TRACE=1              MAIN, ACTION and INFO (plus errors)
    CHARTSKETCH_TRACE=all            every category, including PAINT
    CHARTSKETCH_TRACE=action,paint   an explicit list (errors always included)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import FrozenSet, Optional

MAIN = "MAIN"
ACTION = "ACTION"
PAINT = "PAINT"
INFO = "INFO"
ERROR = "ERROR"
CRASH = "CRASH"

ALL_CATEGORIES: FrozenSet[str] = frozenset({MAIN, ACTION, PAINT, INFO, ERROR, CRASH})
# PAINT fires on every render pass and must be asked for explicitly
DEFAULT_CATEGORIES: FrozenSet[str] = ALL_CATEGORIES - {PAINT}
_ALWAYS = frozenset({ERROR, CRASH})

# Log file (None for stderr only)
LOG_FILE: Optional[str] = "chartsketch_debug.log"

_logger = logging.getLogger("chartsketch.trace")
_logger.propagate = False


def parse_categories(value: str) -> FrozenSet[str]:
    """Turn a CHARTSKETCH_TRACE value into the set of enabled categories."""
    value = (value or "").strip()
    if value in ("", "0"):
        return frozenset()
    if value == "1":
        return DEFAULT_CATEGORIES
    if value.lower() == "all":
        return ALL_CATEGORIES
    names = {part.strip().upper() for part in value.split(",") if part.strip()}
    return frozenset(names) | _ALWAYS


ENABLED: FrozenSet[str] = parse_categories(os.environ.get("CHARTSKETCH_TRACE", ""))
DEBUG_TRACE = bool(ENABLED)


def enabled(category: str) -> bool:
    return category in ENABLED


def _ensure_handlers() -> None:
    if _logger.handlers:
        return
    formatter = logging.Formatter(
        "[%(asctime)s.%(msecs)03d] [%(category)s] %(message)s", datefmt="%H:%M:%S"
    )
    handlers = [logging.StreamHandler(sys.stderr)]
    if LOG_FILE:
        try:
            handlers.append(logging.FileHandler(LOG_FILE, mode="w", encoding="utf-8"))
        except OSError as e:
            print(f"debug_trace: cannot open {LOG_FILE}: {e}", file=sys.stderr)
    for handler in handlers:
        handler.setFormatter(formatter)
        _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG)


def trace(msg: str, category: str = INFO) -> None:
    """Emit a trace line if ``category`` is enabled."""
    if not enabled(category):
        return
    _ensure_handlers()
    _logger.debug(msg, extra={"category": category})


def trace_exception(msg: str = "Exception") -> None:
    """Trace the exception currently being handled, with its traceback."""
    if not enabled(ERROR):
        return
    _ensure_handlers()
    _logger.debug(msg, exc_info=True, extra={"category": ERROR})


def close_log() -> None:
    """Detach and close the trace handlers."""
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()
