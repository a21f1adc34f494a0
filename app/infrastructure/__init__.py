"""Infrastructure modules for the landing page service.

Centralized infrastructure components:
- configuration: Settings management (Settings, load_settings, ConfigurationError)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Language negotiation (SupportedLanguage, LanguageResolver)
- templating: Immutable template store and safe rendering (TemplateStore, render_template)
- http: Response builders and error page interception (intercept)
- services: Dependency injection services (SettingsDep, TemplateStoreDep)
"""

# Observability
from infrastructure.logging import get_module_logger

# i18n
from infrastructure.i18n import LanguageResolver, SupportedLanguage

# Templating
from infrastructure.templating import RenderResult, TemplateStore, render_template

__all__ = [
    "get_module_logger",
    "SupportedLanguage",
    "LanguageResolver",
    "RenderResult",
    "TemplateStore",
    "render_template",
]
