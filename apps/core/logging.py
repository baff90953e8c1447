"""
Structured logging configuration for the Product Delete service
"""

import logging

import structlog
from django.conf import settings


def setup_logging() -> None:
    """Setup structured logging with consistent format"""

    logging.getLogger("apps").setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    # Format as JSON for production, console for development
    if getattr(settings, "LOG_FORMAT", "console") == "console":
        renderers = [structlog.dev.ConsoleRenderer()]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=[
            # Drop events below the stdlib logger's level
            structlog.stdlib.filter_by_level,
            # Add log level
            structlog.stdlib.add_log_level,
            # Add logger name
            structlog.stdlib.add_logger_name,
            # Add timestamp
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
