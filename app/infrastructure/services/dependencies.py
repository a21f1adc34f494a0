"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver
from infrastructure.services.providers import (
    get_app_settings,
    get_language_resolver,
    get_template_store,
)
from infrastructure.templating import TemplateStore

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# Template store dependency - read-only, shared by all requests
TemplateStoreDep = Annotated[TemplateStore, Depends(get_template_store)]

# Language resolver dependency
LanguageResolverDep = Annotated[LanguageResolver, Depends(get_language_resolver)]

__all__ = [
    "SettingsDep",
    "TemplateStoreDep",
    "LanguageResolverDep",
]
