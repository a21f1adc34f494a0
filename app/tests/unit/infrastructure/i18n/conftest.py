"""Feature-level fixtures for i18n system tests."""

import pytest

from infrastructure.i18n import LanguageResolver, SupportedLanguage


@pytest.fixture
def resolver():
    return LanguageResolver(default_language=SupportedLanguage.EN)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "spanish_preferred": "es;q=0.8,en;q=0.5",
        "unsupported_only": "fr;q=0.9,de;q=0.8",
        "portuguese_full_weight": "pt;q=1.0",
        "regional_only": "pt-BR",
        "regional_then_generic": "pt-BR,pt;q=0.9",
        "regional_then_english": "es-MX,en;q=0.5",
        "wildcard_only": "*",
        "wildcard_first": "*;q=1.0,es;q=0.5",
        "tie_declaration_order": "pt;q=0.7,es;q=0.7,en;q=0.7",
        "invalid_quality": "es;q=invalid,pt;q=0.3",
        "out_of_range_quality": "es;q=1.5,pt;q=0.2",
        "not_acceptable": "es;q=0,pt;q=0.1",
        "garbage": ";;;,,,=q;",
    }
