"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import Any

from .config.logging import SINK_NAMES, LoggingSettings
from .exceptions import UnknownSinkError
from .formatters import BaseFormatter, ConsoleFormatter, JsonFormatter, SyslogFormatter
from .records import LogRecord
from .severity import syslog_priority

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


# Live SyslogSink instances; closelog() is process-wide, so only the last one calls it.
_syslog_openers = 0
_syslog_lock = threading.Lock()


class BaseSink(ABC):
    """Abstract base class for log sinks.

    Each sink owns its formatter and serializes access to its own transport.
    """

    def __init__(self, formatter: BaseFormatter):
        self.formatter = formatter
        self._lock = threading.Lock()

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """Emit a log record to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class ConsoleSink(BaseSink):
    """Append-only console sink.

    Args:
        formatter: Line renderer (default: colored ``ConsoleFormatter``)
        stream: Output stream (default: stderr)
    """

    def __init__(self, formatter: BaseFormatter | None = None, stream: Any = None):
        super().__init__(formatter or ConsoleFormatter())
        self._stream = stream or sys.stderr

    def emit(self, record: LogRecord) -> None:
        line = self.formatter.format(record) + "\n"
        with self._lock:
            try:
                self._write(line)
            except OSError:
                # one retry, then let the dispatcher drop the record
                self._write(line)

    def _write(self, line: str) -> None:
        self._stream.write(line)
        self._stream.flush()

    def close(self) -> None:
        # The stream is shared with the process; flush, never close.
        with self._lock:
            self._stream.flush()


class SyslogSink(BaseSink):
    """System logger sink using the native syslog transport, facility user."""

    def __init__(self, ident: str | None = None, formatter: BaseFormatter | None = None):
        super().__init__(formatter or SyslogFormatter())
        try:
            import syslog

            self._syslog: Any = syslog
            self._closed = False
            if ident:
                syslog.openlog(ident, syslog.LOG_PID, syslog.LOG_USER)
            else:
                syslog.openlog(logoption=syslog.LOG_PID, facility=syslog.LOG_USER)
            self._available = True
            _retain_syslog()
        except ImportError:
            self._syslog = None
            self._available = False

    @property
    def available(self) -> bool:
        return self._available

    def emit(self, record: LogRecord) -> None:
        if not self._available:
            return
        priority = syslog_priority(record.context.priority) | self._syslog.LOG_USER
        message = self.formatter.format(record)
        with self._lock:
            self._syslog.syslog(priority, message)

    def close(self) -> None:
        if not self._available:
            return
        with self._lock:
            if self._closed:
                return
            self._closed = True
        if _release_syslog() == 0:
            self._syslog.closelog()


def _retain_syslog() -> None:
    global _syslog_openers

    with _syslog_lock:
        _syslog_openers += 1


def _release_syslog() -> int:
    global _syslog_openers

    with _syslog_lock:
        _syslog_openers = max(_syslog_openers - 1, 0)
        return _syslog_openers


# =============================================================================
# Factory
# =============================================================================


def build_sinks(settings: LoggingSettings) -> tuple[BaseSink, ...]:
    """Create the configured sinks, console first and syslog second."""
    requested = set(settings.sink_names)
    for name in requested:
        if name not in SINK_NAMES:
            raise UnknownSinkError(name=name, known=SINK_NAMES)

    sinks: list[BaseSink] = []
    for name in SINK_NAMES:
        if name not in requested:
            continue
        if name == "console":
            if settings.format.value == "json":
                formatter: BaseFormatter = JsonFormatter()
            else:
                formatter = ConsoleFormatter(timestamp_format=settings.timestamp_format, use_color=settings.color)
            stream = sys.stdout if settings.stream == "stdout" else sys.stderr
            sinks.append(ConsoleSink(formatter, stream=stream))
        elif name == "syslog":
            sinks.append(SyslogSink(ident=settings.syslog_ident))
    return tuple(sinks)
