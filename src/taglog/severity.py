"""
Severity model and per-severity presentation tables.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping

# =============================================================================
# Severity Levels
# =============================================================================


class Severity(IntEnum):
    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @classmethod
    def coerce(cls, priority: Any) -> Severity | None:
        """Return the matching severity, or None for anything out of range."""
        if isinstance(priority, bool) or not isinstance(priority, int):
            return None
        try:
            return cls(priority)
        except ValueError:
            return None

    @classmethod
    def from_stdlib(cls, levelno: int) -> Severity:
        """Map a standard library logging level onto the severity model."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.VERBOSE


# =============================================================================
# Console Presentation
# =============================================================================

RESET = "\033[0m"
TAG_STYLE = "\033[01;37m"


@dataclass(frozen=True)
class SeverityStyle:
    glyph: str
    color: str = ""

    def render(self, use_color: bool = True) -> str:
        if not use_color or not self.color:
            return self.glyph
        return f"{self.color}{self.glyph}{RESET}"


SEVERITY_STYLES: Mapping[Severity, SeverityStyle] = {
    Severity.VERBOSE: SeverityStyle("V"),
    Severity.DEBUG: SeverityStyle("D", "\033[1;34m"),
    Severity.INFO: SeverityStyle("I", "\033[01;36m"),
    Severity.WARN: SeverityStyle("W", "\033[01;35m"),
    Severity.ERROR: SeverityStyle("E", "\033[01;31m"),
    Severity.FATAL: SeverityStyle("F", "\033[01;31m"),
}


def render_glyph(priority: Any, *, use_color: bool = True) -> str:
    """Render the one-character console glyph; empty for unknown priorities."""
    severity = Severity.coerce(priority)
    if severity is None:
        return ""
    return SEVERITY_STYLES[severity].render(use_color)


# =============================================================================
# Syslog Mapping
# =============================================================================

# RFC 5424 numeric severities, identical to the syslog module's LOG_* values.
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_INFO = 6
LOG_DEBUG = 7

SYSLOG_PRIORITIES: Mapping[Severity, int] = {
    Severity.VERBOSE: LOG_DEBUG,
    Severity.DEBUG: LOG_DEBUG,
    Severity.INFO: LOG_INFO,
    Severity.WARN: LOG_WARNING,
    Severity.ERROR: LOG_ERR,
    Severity.FATAL: LOG_CRIT,
}


def syslog_priority(priority: Any) -> int:
    """Map a priority to its syslog severity; unknown priorities become LOG_DEBUG."""
    severity = Severity.coerce(priority)
    if severity is None:
        return LOG_DEBUG
    return SYSLOG_PRIORITIES[severity]
