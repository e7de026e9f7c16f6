"""
Record formatters for the console and syslog sinks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import orjson

from .records import LogRecord
from .severity import RESET, TAG_STYLE, render_glyph

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d-%H:%M:%S"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default).decode()


class BaseFormatter(ABC):
    """Render a log record into the text a sink writes."""

    @abstractmethod
    def format(self, record: LogRecord) -> str: ...


class ConsoleFormatter(BaseFormatter):
    """Human-readable console line.

    Format: ``YYYY-MM-DD-HH:MM:SS G/tag(pid): message``

    Color escapes are written whenever ``use_color`` is set, without checking
    whether the stream is a terminal.
    """

    def __init__(self, *, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT, use_color: bool = True):
        self.timestamp_format = timestamp_format
        self.use_color = use_color

    def _style_tag(self, tag: str) -> str:
        if not self.use_color:
            return tag
        return f"{TAG_STYLE}{tag}{RESET}"

    def format(self, record: LogRecord) -> str:
        ctx = record.context
        return "".join(
            [
                ctx.timestamp.strftime(self.timestamp_format),
                " ",
                render_glyph(ctx.priority, use_color=self.use_color),
                "/",
                self._style_tag(ctx.tag),
                f"({ctx.process_id})",
                ": ",
                record.message,
            ]
        )


class JsonFormatter(BaseFormatter):
    """One compact JSON object per line, for machine parsing."""

    def format(self, record: LogRecord) -> str:
        ctx = record.context
        severity = ctx.severity
        return orjson_dumps(
            {
                "timestamp": ctx.timestamp.isoformat(),
                "severity": severity.name if severity is not None else ctx.priority,
                "tag": ctx.tag,
                "process_id": ctx.process_id,
                "message": record.message,
            }
        )


class SyslogFormatter(BaseFormatter):
    """Plain ``tag: message``; the syslog transport adds its own header and pid."""

    def format(self, record: LogRecord) -> str:
        return f"{record.context.tag}: {record.message}"
