"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.landing import LandingPageSettings

__all__ = [
    "LandingPageSettings",
]
