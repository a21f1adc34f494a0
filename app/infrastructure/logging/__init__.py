"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the landing page service using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging(settings=settings)

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

from infrastructure.logging.context import (
    CORRELATION_ID_HEADER,
    bind_request_context,
)

from infrastructure.logging.formatters import add_app_info, truncate_large_values

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "CORRELATION_ID_HEADER",
    "bind_request_context",
    # Formatters
    "add_app_info",
    "truncate_large_values",
]
