"""Structlog configuration and logger setup.

This module provides the core logging configuration for the application.
It configures structlog with processors for request context, timestamps and
exception formatting, and picks console or JSON rendering by environment.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging(settings=settings)

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import add_app_info, truncate_large_values

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "landing-page"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Configures structlog with:
    - Context variable merging for correlation IDs
    - Application name and version on every entry
    - Proper exception formatting with stack traces
    - Test environment detection for log suppression

    Args:
        settings: Optional Settings; supplies LOG_LEVEL, GIT_SHA and the
            production flag. Defaults apply when omitted.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for production mode. Controls JSON
            vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors avoid errors, but nothing is emitted because the
        # root logger level is above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    if is_production is not None:
        prod_mode = is_production
    elif settings is not None:
        prod_mode = settings.is_production
    else:
        prod_mode = False

    app_version = settings.GIT_SHA if settings is not None else "unknown"

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_info(APP_NAME, app_version),
        truncate_large_values(max_length=1000),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Add pretty printing for development, JSON for production
    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or (
        settings.LOG_LEVEL if settings is not None else "INFO"
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
        force=True,
    )

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import, reconfigured at startup)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The logger is resolved lazily, so modules imported before
    ``configure_logging(settings=...)`` still log with the startup
    configuration.

    Returns:
        Logger bound with component and module_path context

    Example:
        # In infrastructure/templating/renderer.py
        logger = get_module_logger()
        # context: {"component": "renderer",
        #           "module_path": "infrastructure.templating.renderer"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return structlog.stdlib.get_logger()

    frame = current_frame.f_back
    module = inspect.getmodule(frame) if frame is not None else None

    if module:
        module_name = module.__name__
        return structlog.stdlib.get_logger(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
