"""
Taglog Configuration Module.

Multi-Environment Support:
    Set `TAGLOG_ENV` to one of: development, testing, staging, production
    The system will load .env files in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from taglog.config import settings

    settings.logging.sink_names  # ("console",)
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings, StdlibLevel, SINK_NAMES


def _get_env_files() -> tuple[str, ...]:
    """
    Determine which .env files to load based on TAGLOG_ENV.

    This function is called at module import time to configure the Settings class.
    """
    env = os.getenv("TAGLOG_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """Composite settings; each sub-settings object loads from its own env prefix."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=_get_env_files())


settings = Settings()

__all__ = ["LogFormat", "LoggingSettings", "SINK_NAMES", "Settings", "StdlibLevel", "settings"]
