"""Landing page service configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Feature settings
from infrastructure.configuration.features import LandingPageSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(BaseSettings):
    """Service configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Features**: Feature module configurations (landing page)
    - **Infrastructure**: Core system configurations (server)

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.configuration import load_settings

        settings = load_settings()

        color = settings.landing.COLOR
        port = settings.server.PORT

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Feature settings
    landing: LandingPageSettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Features
            "landing": LandingPageSettings,
            # Infrastructure
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
