"""
Interceptors for capturing standard library logs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .severity import Severity

if TYPE_CHECKING:
    from .core import Logger


class TaglogHandler(logging.Handler):
    """
    Redirect standard library logging records into a taglog Logger.
    The stdlib logger name becomes the tag.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Format message using stdlib's formatting (handles %s args)
            msg = self.format(record)
            self._logger.emit(Severity.from_stdlib(record.levelno), record.name or "root", msg)
        except Exception:
            self.handleError(record)


def intercept_stdlib(logger: Logger, level: str = "INFO") -> TaglogHandler:
    """Replace the root logger's handlers with a single TaglogHandler."""
    handler = TaglogHandler(logger)
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)
    return handler
