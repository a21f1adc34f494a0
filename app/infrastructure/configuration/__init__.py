"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the landing
page service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LandingPageSettings: Landing page feature settings
    ServerSettings: Server runtime settings
    ConfigurationError: Raised when required configuration is missing
    load_settings: Validate configuration once at startup

Example:
    ```python
    from infrastructure.configuration import ConfigurationError, load_settings

    try:
        settings = load_settings()
    except ConfigurationError:
        sys.exit(1)

    color = settings.landing.COLOR
    ```
"""

from infrastructure.configuration.features import LandingPageSettings
from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.configuration.loader import ConfigurationError, load_settings
from infrastructure.configuration.settings import Settings

__all__ = [
    "Settings",
    "LandingPageSettings",
    "ServerSettings",
    "ConfigurationError",
    "load_settings",
]
