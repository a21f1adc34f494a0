import sys

import uvicorn

from infrastructure.configuration import ConfigurationError, load_settings
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.templating import TemplateStoreError, build_template_store

logger = get_module_logger()


def validate_startup():
    """Validate configuration and templates before serving.

    Returns:
        The validated Settings.

    Raises:
        ConfigurationError: If required configuration is missing.
        TemplateStoreError: If the templates cannot be loaded or compiled.
    """
    settings = load_settings()
    configure_logging(settings=settings)
    build_template_store(settings.landing.TEMPLATES_DIR)
    return settings


def main() -> int:
    """Main function to start the application."""
    try:
        settings = validate_startup()
    except (ConfigurationError, TemplateStoreError) as e:
        logger.error("application_startup_failed", error=str(e))
        return 1

    logger.info(
        "application_starting",
        host=settings.server.HOST,
        port=settings.server.PORT,
        workers=settings.server.WORKERS,
    )
    uvicorn.run(
        "server.server:create_app",
        factory=True,
        host=settings.server.HOST,
        port=settings.server.PORT,
        workers=settings.server.WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
