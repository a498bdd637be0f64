"""structlog setup shared by the API and the command line script."""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure stdlib logging and structlog.

    Level precedence: function arg > ``QUADMAP_LOG_LEVEL`` > INFO. The
    ``json`` format renders one JSON object per event; anything else uses
    the console renderer.
    """
    level_name = (level or settings.log_level or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_format = (log_format or settings.log_format).lower()

    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    renderer = (structlog.processors.JSONRenderer() if log_format == "json"
                else structlog.dev.ConsoleRenderer())

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
        cache_logger_on_first_use=True,
    )
