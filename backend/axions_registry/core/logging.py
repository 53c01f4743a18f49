"""
Structured logging configuration using structlog
Flow: Settings → stdlib root logger → structlog processor chain → JSON | console output
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.processors import CallsiteParameter
from structlog.typing import Processor

from axions_registry.config.settings import Settings, get_settings

# HTTP client libraries log every registry request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def build_processors(log_format: str) -> List[Processor]:
    """Processor chain ending in the renderer selected by LOG_FORMAT."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.MODULE,
                CallsiteParameter.LINENO,
                CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging for the service.

    Args:
        settings: Settings override, defaults to the cached settings
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.DEBUG else max(level, logging.WARNING))

    structlog.configure(
        processors=build_processors(settings.LOG_FORMAT),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger, optionally with initial context bound."""
    logger = structlog.get_logger(name)
    if kwargs:
        logger = logger.bind(**kwargs)
    return logger
