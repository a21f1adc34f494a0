"""
Provider functions for dependency injection.

Settings and the template store are built once by ``create_app`` and kept on
``app.state``; request-scoped providers read them from there.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver
from infrastructure.templating import TemplateStore


def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the running application was created with.

    Usage:
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}
    """
    return request.app.state.settings


def get_template_store(request: Request) -> TemplateStore:
    """
    Get the read-only template store built at startup.

    Returns:
        TemplateStore: The application-wide template store.
    """
    return request.app.state.template_store


@lru_cache
def get_language_resolver() -> LanguageResolver:
    """
    Get application-scoped language resolver singleton.

    Returns:
        LanguageResolver: Resolver falling back to English.
    """
    return LanguageResolver()
