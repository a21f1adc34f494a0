"""i18n system - language negotiation for localized pages.

Resolves which of the supported languages a response is rendered in, from
an explicit query override and the client's Accept-Language preferences.

Main components:
- models: SupportedLanguage, LanguagePreference
- resolvers: LanguageResolver, parse_accept_language
"""

from infrastructure.i18n.models import LanguagePreference, SupportedLanguage
from infrastructure.i18n.resolvers import (
    HeaderParseError,
    LanguageResolver,
    parse_accept_language,
)

__all__ = [
    "SupportedLanguage",
    "LanguagePreference",
    "HeaderParseError",
    "LanguageResolver",
    "parse_accept_language",
]
