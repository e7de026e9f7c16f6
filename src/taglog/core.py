"""
Dispatcher: splits messages, attaches attributes and fans records out to sinks.
"""

from __future__ import annotations

import os
import threading
from datetime import datetime
from typing import Any, Iterable

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars
from structlog.typing import EventDict, WrappedLogger

from .records import AttributeContext, LogRecord, split_lines
from .severity import Severity
from .sinks import BaseSink, ConsoleSink, build_sinks

# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add local wall-clock time (microsecond resolution) to the event."""
    event_dict["timestamp"] = datetime.now()
    return event_dict


def build_record(event_dict: EventDict) -> LogRecord:
    """Build a record from the four fixed attributes; other context keys are ignored."""
    context = AttributeContext(
        timestamp=event_dict["timestamp"],
        priority=event_dict["priority"],
        tag=event_dict["tag"],
        process_id=event_dict["process_id"],
    )
    return LogRecord(context=context, message=event_dict["event"])


# =============================================================================
# Logger
# =============================================================================


class Logger:
    """Owns an immutable sink list and dispatches every call synchronously.

    Construct it once at the composition root and hand it to whoever logs.
    """

    def __init__(self, sinks: Iterable[BaseSink], *, min_severity: Severity = Severity.VERBOSE):
        self._sinks: tuple[BaseSink, ...] = tuple(sinks)
        self._min_severity = min_severity
        # ReturnLogger swallows the renderer output; sinks do the real writing.
        self._bound = structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[merge_contextvars, add_timestamp, self._dispatch],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=False,
        )

    @property
    def sinks(self) -> tuple[BaseSink, ...]:
        return self._sinks

    def _dispatch(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        """Render to all sinks in registration order. Returns empty to suppress default output."""
        record = build_record(event_dict)
        for sink in self._sinks:
            try:
                sink.emit(record)
            except Exception:
                pass  # A failing sink never blocks the others or the caller
        return ""

    def _is_enabled(self, priority: int) -> bool:
        severity = Severity.coerce(priority)
        return severity is None or severity >= self._min_severity

    def emit(self, priority: int, tag: str, message: str | None) -> None:
        """Dispatch each line of ``message`` to every sink. Never raises.

        ``message=None`` means upstream formatting failed; nothing is emitted.
        """
        if message is None:
            return
        try:
            if not self._is_enabled(priority):
                return
            with bound_contextvars(tag=str(tag), process_id=os.getpid()):
                for line in split_lines(str(message)):
                    self._bound.msg(line, priority=priority)
        except Exception:
            pass  # Logging must never fail the caller

    def close(self) -> None:
        for sink in self._sinks:
            try:
                sink.close()
            except Exception:
                pass


# =============================================================================
# Process Logger
# =============================================================================

_logger: Logger | None = None
_logger_lock = threading.Lock()


def configure_logging(settings: Any = None) -> Logger:
    """
    Build a Logger from logging settings.

    Args:
        settings: ``LoggingSettings``; defaults to ``taglog.config.settings.logging``
    """
    if settings is None:
        from .config import settings as app_settings

        settings = app_settings.logging

    logger = Logger(build_sinks(settings), min_severity=settings.min_severity)

    if settings.capture_stdlib:
        # Import here to avoid circular imports
        from .interceptors import intercept_stdlib

        intercept_stdlib(logger, level=settings.stdlib_level.value)

    return logger


def get_logger() -> Logger:
    """Return the process logger, creating it from settings on first use."""
    global _logger

    if _logger is None:
        with _logger_lock:
            if _logger is None:
                try:
                    _logger = configure_logging()
                except Exception as exc:
                    # Bad settings must not silence the console; fall back once and say why.
                    _logger = Logger([ConsoleSink()])
                    _logger.emit(Severity.ERROR, "taglog", f"invalid logging configuration, using console only: {exc}")
    return _logger


def set_logger(logger: Logger | None) -> None:
    """Install the process logger built by the composition root."""
    global _logger

    with _logger_lock:
        _logger = logger
