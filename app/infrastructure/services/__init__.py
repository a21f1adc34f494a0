"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LanguageResolverDep,
    SettingsDep,
    TemplateStoreDep,
)
from infrastructure.services.providers import (
    get_app_settings,
    get_language_resolver,
    get_template_store,
)

__all__ = [
    "SettingsDep",
    "TemplateStoreDep",
    "LanguageResolverDep",
    "get_app_settings",
    "get_template_store",
    "get_language_resolver",
]
