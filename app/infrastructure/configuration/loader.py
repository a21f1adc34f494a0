"""Startup-time configuration loading and validation."""

from pydantic import ValidationError

import structlog
from infrastructure.configuration.settings import Settings

logger = structlog.get_logger()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""

    def __init__(self, message: str, fields: tuple = ()):
        super().__init__(message)
        self.fields = fields


def load_settings(**overrides) -> Settings:
    """Load and validate settings once at process startup.

    Required values (such as COLOR) are checked here so the serving path
    never reads configuration that may be missing.

    Args:
        **overrides: Optional overrides for specific settings sections.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If a required value is missing or invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = tuple(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        logger.error("configuration_invalid", fields=list(fields), error=str(e))
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}", fields=fields
        ) from e
