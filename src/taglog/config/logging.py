"""
Logging Configuration.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taglog.severity import Severity

SINK_NAMES = ("console", "syslog")


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class StdlibLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingSettings(BaseSettings):
    """Sink selection and console presentation, resolved once at startup."""

    model_config = SettingsConfigDict(
        env_prefix="TAGLOG_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    sinks: str = Field(default="console", description="Comma-separated sink names (console, syslog)")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Console sink output format")
    stream: Literal["stderr", "stdout"] = Field(default="stderr", description="Console sink stream")
    color: bool = Field(default=True, description="Emit ANSI color escapes on the console")
    timestamp_format: str = Field(default="%Y-%m-%d-%H:%M:%S", description="Console timestamp format")
    min_severity: Severity = Field(default=Severity.VERBOSE, description="Drop records below this severity")
    syslog_ident: str | None = Field(default=None, description="Syslog ident (defaults to program name)")
    capture_stdlib: bool = Field(default=False, description="Route stdlib logging into taglog")
    stdlib_level: StdlibLevel = Field(default=StdlibLevel.INFO, description="Root level for captured stdlib logs")

    @field_validator("sinks")
    @classmethod
    def _check_sinks(cls, value: str) -> str:
        for name in _split_names(value):
            if name not in SINK_NAMES:
                raise ValueError(f"unknown sink '{name}', expected one of: {', '.join(SINK_NAMES)}")
        return value

    @field_validator("min_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value.strip().isdigit():
                return int(value)
            try:
                return Severity[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown severity '{value}'") from None
        return value

    @property
    def sink_names(self) -> tuple[str, ...]:
        return _split_names(self.sinks)


def _split_names(value: str) -> tuple[str, ...]:
    return tuple(name.strip().lower() for name in value.split(",") if name.strip())
