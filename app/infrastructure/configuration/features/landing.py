"""Landing page feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class LandingPageSettings(FeatureSettings):
    """Landing page configuration.

    Environment Variables:
        COLOR: Display color injected into the index page (required)
        TEMPLATES_DIR: Directory holding layout.html, index.html and
            error.html (default: the templates shipped with the app)

    Example:
        ```python
        from infrastructure.configuration import load_settings

        settings = load_settings()

        color = settings.landing.COLOR
        ```
    """

    COLOR: str = Field(alias="COLOR")
    TEMPLATES_DIR: Optional[Path] = Field(default=None, alias="TEMPLATES_DIR")

    @field_validator("COLOR")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Reject blank colors."""
        v = v.strip()
        if not v:
            raise ValueError("COLOR must not be empty")
        return v
