"""
Tagged logging for Taglog.

Each call carries a severity, a short tag and a message. Multi-line messages
become one record per line, and every record goes to each configured sink:
- console: colored ``YYYY-MM-DD-HH:MM:SS G/tag(pid): message`` lines (or JSON)
- syslog: native syslog transport, facility user, with severity remapping

Design Pattern: Strategy Pattern for sink abstraction.
Library: structlog for the processor pipeline and call-scoped context.
"""

from .api import debug, emit, error, fatal, format_message, info, print_log, verbose, warn
from .core import Logger, configure_logging, get_logger, set_logger
from .severity import Severity

__all__ = [
    "Logger",
    "Severity",
    "configure_logging",
    "debug",
    "emit",
    "error",
    "fatal",
    "format_message",
    "get_logger",
    "info",
    "print_log",
    "set_logger",
    "verbose",
    "warn",
]
