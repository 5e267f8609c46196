"""Structured logging configuration — structlog + stdlib logging.

Everything is rendered to stderr: stdout is reserved for the JSON context
document consumed by the host tool.
"""

from __future__ import annotations

import logging
import logging.config

import structlog

from superpowers_nextjs.core.config import Settings


def setup_logging(settings: Settings | None = None, *, verbose: bool = False) -> None:
    """Configure structlog and stdlib logging.

    Args:
        settings: Level and renderer to use. Defaults to ``Settings()``.
        verbose: Force DEBUG regardless of the configured level.
    """
    settings = settings or Settings()
    log_level = "DEBUG" if verbose else settings.log_level

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    # --- structlog configure ---
    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # --- stdlib logging configure ---
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": log_level,
            },
            "loggers": {
                "superpowers_nextjs": {"level": log_level},
            },
        }
    )
