"""Environment-driven settings for the session-start hook."""

from __future__ import annotations

import os
from dataclasses import dataclass

from superpowers_nextjs.exceptions import ConfigError

ENV_LOG_LEVEL = "SUPERPOWERS_NEXTJS_LOG_LEVEL"
ENV_LOG_FORMAT = "SUPERPOWERS_NEXTJS_LOG_FORMAT"
ENV_SEARCH_ROOT = "SUPERPOWERS_NEXTJS_SEARCH_ROOT"
ENV_PLUGIN_ROOT = "CLAUDE_PLUGIN_ROOT"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMATS = ["console", "json"]


@dataclass(frozen=True)
class Settings:
    """Runtime settings. Defaults: WARNING level, console renderer."""

    log_level: str = "WARNING"
    log_format: str = "console"
    search_root: str | None = None
    plugin_root: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``SUPERPOWERS_NEXTJS_*`` environment variables.

        Raises:
            ConfigError: log level or log format is not recognised.
        """
        log_level = os.environ.get(ENV_LOG_LEVEL, cls.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(ENV_LOG_LEVEL, log_level, LOG_LEVELS)

        log_format = os.environ.get(ENV_LOG_FORMAT, cls.log_format).lower()
        if log_format not in LOG_FORMATS:
            raise ConfigError(ENV_LOG_FORMAT, log_format, LOG_FORMATS)

        return cls(
            log_level=log_level,
            log_format=log_format,
            search_root=os.environ.get(ENV_SEARCH_ROOT) or None,
            plugin_root=os.environ.get(ENV_PLUGIN_ROOT) or None,
        )
