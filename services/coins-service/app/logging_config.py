"""
Logging configuration module for coins service.

Provides centralized structlog setup with consistent formatting across the application.
Request IDs are carried in structlog context variables so every log line emitted while
handling a request is tagged with it.
"""

import logging
import sys
from typing import Any, List, Optional
from uuid import uuid4

import structlog

REQUEST_ID_KEY = "request_id"


def setup_logging(
    log_level: str = "INFO",
    service_name: str = "coins-api",
    use_json: bool = False,
) -> structlog.stdlib.BoundLogger:
    """
    Configure application logging with structured format.

    Sets up structlog on top of the standard library root logger. Supports
    JSON rendering for production and console rendering for development.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for log identification
        use_json: Use JSON structured logging instead of console format

    Returns:
        Configured logger instance bound to the service name
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    renderer: Any
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return structlog.get_logger(service_name)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return structlog.get_logger(name or "coins-api")


def bind_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request ID to the logging context.

    Args:
        request_id: Request ID to bind, generates new UUID if None

    Returns:
        The request ID that was bound
    """
    if not request_id:
        request_id = str(uuid4())
    structlog.contextvars.bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def get_request_id() -> Optional[str]:
    """Current request ID, or None outside a request."""
    return structlog.contextvars.get_contextvars().get(REQUEST_ID_KEY)


def clear_request_id() -> None:
    """Clear request ID from context."""
    structlog.contextvars.unbind_contextvars(REQUEST_ID_KEY)
