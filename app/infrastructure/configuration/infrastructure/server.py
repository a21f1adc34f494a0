"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        HOST: Bind address (default: 0.0.0.0)
        PORT: Bind port (default: 5000)
        WORKERS: Number of uvicorn worker processes (default: 4)
        STATIC_DIR: Directory served under /static (default: static)
        STATIC_ENABLED: Mount static files when the directory exists

    Example:
        ```python
        from infrastructure.configuration import load_settings

        settings = load_settings()

        port = settings.server.PORT
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=5000, alias="PORT")
    WORKERS: int = Field(default=4, ge=1, alias="WORKERS")
    STATIC_DIR: str = Field(default="static", alias="STATIC_DIR")
    STATIC_ENABLED: bool = Field(default=True, alias="STATIC_ENABLED")
