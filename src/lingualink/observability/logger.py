"""
Structured logging configuration for the LinguaLink service.

Uses structlog for JSON-formatted logs with consistent context binding for
request_id, user_id and session_id throughout a request.
"""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO") -> None:
    """
    Configure structlog with JSON formatter for production logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_request_context(
    logger: structlog.BoundLogger,
    request_id: str,
    user_id: str | None = None,
    session_id: str | None = None,
) -> structlog.BoundLogger:
    """
    Bind request context to logger.

    Args:
        logger: Base logger instance
        request_id: Identifier for the HTTP request being served
        user_id: Opaque user identifier (optional)
        session_id: Conversation or translation session identifier (optional)

    Returns:
        BoundLogger with context bound

    Example:
        >>> logger = get_logger(__name__)
        >>> logger = bind_request_context(logger, request_id="req-123", user_id="u-1")
        >>> logger.info("translation_requested")  # Includes request_id and user_id
    """
    context = {"request_id": request_id}
    if user_id:
        context["user_id"] = user_id
    if session_id:
        context["session_id"] = session_id

    return logger.bind(**context)
