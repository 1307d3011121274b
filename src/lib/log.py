"""
Loguru logging bound to the pipeline's verbosity.

The CLI connects its ProgramState once; translator, link resolver and
rasterizer then call LOG() without threading the state through every call.
Library use (no connected state) stays silent unless a call is forced by
settings.debug_mode.

Verbosity maps onto loguru levels:
    1 -> INFO     progress of the pipeline stages
    2 -> DEBUG    resolved paths, link titles, table widths
    3 -> TRACE    one record per translated event

Usage:
    from .log import LOG

    LOG("Translating markdown to LaTeX...", level=1)
    LOG(f"Event: {event!r}", level=3, force=settings.debug_mode)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

LEVEL_NAMES = {1: "INFO", 2: "DEBUG", 3: "TRACE"}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <11}</cyan>:<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> None:
    """Make `state.verbosity` govern every subsequent LOG() in this context"""
    _program_state.set(state)


def verbosity_get() -> int:
    """Verbosity of the connected state, 0 when nothing is connected"""
    state = _program_state.get()
    if state is None or not hasattr(state, 'verbosity'):
        return 0
    return int(state.verbosity)


def LOG(message: str, level: int = 1, force: bool = False, **kwargs: Any) -> None:
    """
    Emit `message` when the connected verbosity reaches `level`.

    Args:
        message: Text of the record
        level: 1 (normal), 2 (verbose) or 3 (per-event trace)
        force: Emit regardless of verbosity
        **kwargs: Passed through to loguru
    """
    if not force and verbosity_get() < level:
        return
    name = LEVEL_NAMES.get(min(max(level, 1), 3), "DEBUG")
    # depth=1 attributes the record to the caller
    logger.opt(depth=1).log(name, message, **kwargs)
