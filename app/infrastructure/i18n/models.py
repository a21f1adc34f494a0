"""Language models for the i18n system.

Defines the closed set of languages the landing page is published in and
the transient preference entries parsed from an Accept-Language header.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SupportedLanguage(str, Enum):
    """Languages the site is published in.

    Values are the canonical short codes used in the ``lang`` query
    parameter and in the rendered ``<html lang>`` attribute.
    """

    EN = "en"
    ES = "es"
    PT = "pt"

    @classmethod
    def default(cls) -> "SupportedLanguage":
        """Return the fixed default language (English)."""
        return cls.EN

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["SupportedLanguage"]:
        """Convert an exact short code to a SupportedLanguage.

        Args:
            code: Candidate code (e.g., "es"). Matching is exact.

        Returns:
            Matching SupportedLanguage, or None if the code is absent or
            not one of the supported codes.
        """
        if code is None:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True)
class LanguagePreference:
    """A single weighted entry from an Accept-Language header.

    Attributes:
        tag: Language range as sent by the client (e.g., "es", "pt-BR", "*").
        quality: Quality weight in [0.0, 1.0]; 0 means "not acceptable".
    """

    tag: str
    quality: float = 1.0

    @property
    def normalized_tag(self) -> str:
        """Get the lowercased tag; language tags are case-insensitive."""
        return self.tag.lower()

    @property
    def is_wildcard(self) -> bool:
        return self.tag == "*"

    @property
    def is_acceptable(self) -> bool:
        return self.quality > 0.0
