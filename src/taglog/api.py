"""
Public entry points.

``emit`` takes an already-formatted message. ``print_log`` and the per-severity
helpers accept printf-style ``fmt, *args`` and drop the call entirely when the
arguments do not fit the format.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .core import get_logger
from .severity import Severity


def format_message(fmt: Any, *args: Any) -> str | None:
    """Apply %-formatting when args are given; None if formatting fails."""
    if fmt is None:
        return None
    if not args:
        return str(fmt)
    # Same rule as logging.LogRecord: a lone non-empty mapping feeds %(name)s fields.
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return str(fmt) % args
    except (TypeError, ValueError, KeyError):
        return None


def emit(priority: int, tag: str, message: str | None) -> None:
    """Log a pre-formatted message through the process logger. Never raises."""
    try:
        logger = get_logger()
    except Exception:
        return
    logger.emit(priority, tag, message)


def print_log(priority: int, tag: str, fmt: Any, *args: Any) -> None:
    emit(priority, tag, format_message(fmt, *args))


def verbose(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.VERBOSE, tag, fmt, *args)


def debug(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.DEBUG, tag, fmt, *args)


def info(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.INFO, tag, fmt, *args)


def warn(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.WARN, tag, fmt, *args)


def error(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.ERROR, tag, fmt, *args)


def fatal(tag: str, fmt: Any, *args: Any) -> None:
    print_log(Severity.FATAL, tag, fmt, *args)
