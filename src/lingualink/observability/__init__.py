"""Logging and metrics for the LinguaLink service."""

from .logger import bind_request_context, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "bind_request_context",
]
