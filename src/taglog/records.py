"""
Per-line attribute context and log record types.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from .severity import Severity

# Record count is N+1 over "\n"; "\r\n" and a bare "\r" also end a line.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class AttributeContext:
    """Metadata attached to every emitted line.

    ``priority`` keeps the caller's raw value so out-of-range codes still reach
    the sinks; ``severity`` resolves it against the model.
    """

    timestamp: datetime
    priority: int
    tag: str
    process_id: int

    @property
    def severity(self) -> Severity | None:
        return Severity.coerce(self.priority)


@dataclass(frozen=True)
class LogRecord:
    context: AttributeContext
    message: str


def split_lines(message: str) -> list[str]:
    """Split a message into lines, keeping empty lines as empty messages."""
    return _LINE_BREAK.split(message)
