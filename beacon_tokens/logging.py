"""Structured logging setup built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from .config import TokenSecurityConfig


def configure_logging(config: Optional[TokenSecurityConfig] = None) -> None:
    """Configure structlog for console output in development and JSON elsewhere."""
    config = config or TokenSecurityConfig.from_env()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == "console" and not config.is_production:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    # Standard logging for third-party libraries such as asyncpg.
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """Return a bound structlog logger."""
    return structlog.get_logger(name or "beacon_tokens")
