"""structlog setup shared by the app and the CLI entry point."""

import logging

import structlog

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Route structlog through the stdlib logging module.

    ``log_format`` picks JSON lines for deployments or the console renderer
    for local work; ``log_level`` applies to both.
    """
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
