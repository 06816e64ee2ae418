"""
Logging setup.

Configures structlog to route through the standard library logging module,
rendering either JSON lines or human-readable console output.
"""

import logging
import sys
from typing import Optional

import structlog

from ..config import settings

LOG_FORMATS = ("json", "plain")


def configure_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> int:
    """
    Configure structlog and the root stdlib logger.

    Args:
        log_level: Level name such as "DEBUG" or "INFO". Defaults to settings.log_level.
        log_format: "json" or "plain". Defaults to settings.log_format.

    Returns:
        Numeric log level that was applied

    Raises:
        ValueError: If the level name or format is not recognised
    """
    log_level = (settings.log_level if log_level is None else log_level).upper()
    log_format = (settings.log_format if log_format is None else log_format).lower()

    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"Unknown log format: {log_format} (expected one of {', '.join(LOG_FORMATS)})"
        )

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", level=log_level, format=log_format)

    return level
