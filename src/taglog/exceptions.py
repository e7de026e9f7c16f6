"""
Exception hierarchy for taglog.

Only configuration raises; the emit path never propagates an error to its caller.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class TaglogError(Exception):
    """Root of all taglog exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(TaglogError):
    """Invalid logging configuration detected at startup."""

    pass


class UnknownSinkError(ConfigurationError):
    def __init__(self, *, name: str, known: Iterable[str]) -> None:
        known = tuple(known)
        super().__init__(
            f"Unknown sink '{name}' (expected one of: {', '.join(known)})",
            code="UNKNOWN_SINK",
            details={"name": name, "known": known},
        )
