"""Language resolution for the landing page.

Resolves the response language from an explicit ``lang`` query override and
the browser-advertised Accept-Language preferences. Resolution never fails:
every path ends in a SupportedLanguage.
"""

import re
from typing import List, Optional, Union

import structlog
from infrastructure.i18n.models import LanguagePreference, SupportedLanguage

logger = structlog.get_logger(component="i18n.resolver")

# RFC 4647 language range: "*" or alphanumeric subtags of up to 8 chars
_LANGUAGE_RANGE = re.compile(r"^(\*|[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*)$")


class HeaderParseError(ValueError):
    """Raised when an Accept-Language header cannot be read as text."""


def _decode_header(raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError as e:
            raise HeaderParseError("Accept-Language header is not ASCII text") from e
    return raw


def _parse_quality(params: List[str]) -> Optional[float]:
    """Extract the q-value from the parameters of one header entry.

    Returns:
        The quality weight, 1.0 when no q parameter is present, or None when
        the q parameter is malformed or out of range.
    """
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        if not 0.0 <= quality <= 1.0:
            return None
        return quality
    return 1.0


def parse_accept_language(
    accept_language: Optional[Union[str, bytes]],
) -> List[LanguagePreference]:
    """Parse an Accept-Language header into ordered preferences.

    "es;q=0.8,en;q=0.5,pt" -> [(pt, 1.0), (es, 0.8), (en, 0.5)]

    Entries are ordered by descending quality; entries with equal quality
    keep the order in which they were declared. Empty entries, entries that
    are not language ranges and entries with a malformed q-value are dropped.

    Args:
        accept_language: Raw header value, as text or raw bytes.

    Returns:
        Ordered list of LanguagePreference (empty if the header is absent).

    Raises:
        HeaderParseError: If the header is bytes that do not decode as text.
    """
    if not accept_language:
        return []

    header = _decode_header(accept_language)

    preferences = []
    for part in header.split(","):
        tag, *params = part.split(";")
        tag = tag.strip()
        if not _LANGUAGE_RANGE.match(tag):
            continue

        quality = _parse_quality(params)
        if quality is None:
            continue

        preferences.append(LanguagePreference(tag=tag, quality=quality))

    # sorted() is stable, so ties keep declaration order
    return sorted(preferences, key=lambda p: p.quality, reverse=True)


class LanguageResolver:
    """Resolves the response language for a request.

    Resolution order:
    1. ``lang`` query parameter, if it is exactly a supported code
    2. Accept-Language header, first acceptable supported entry
    3. Default language
    """

    def __init__(
        self,
        default_language: SupportedLanguage = SupportedLanguage.EN,
    ):
        """Initialize language resolver.

        Args:
            default_language: Fallback language when no preference matches.
        """
        self.default_language = default_language

    def resolve(
        self,
        query_lang: Optional[str],
        accept_language: Optional[Union[str, bytes]],
    ) -> SupportedLanguage:
        """Resolve the response language.

        An unsupported ``query_lang`` is treated exactly like a missing one.

        Args:
            query_lang: Value of the ``lang`` query parameter, if any.
            accept_language: Accept-Language header value, if any.

        Returns:
            Resolved SupportedLanguage.
        """
        language = SupportedLanguage.from_code(query_lang)
        if language is not None:
            return language

        return self.resolve_from_header(accept_language)

    def resolve_from_header(
        self,
        accept_language: Optional[Union[str, bytes]],
    ) -> SupportedLanguage:
        """Resolve language from an Accept-Language header.

        A wildcard entry never selects a language on its own. Tags must equal
        a supported code, ignoring case; "pt-BR" does not select pt.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            First supported language in preference order, or the default.
        """
        try:
            preferences = parse_accept_language(accept_language)
        except HeaderParseError as e:
            logger.debug(
                "accept_language_unparseable",
                error=str(e),
                default_language=self.default_language.value,
            )
            return self.default_language

        for preference in preferences:
            if preference.is_wildcard or not preference.is_acceptable:
                continue

            language = SupportedLanguage.from_code(preference.normalized_tag)
            if language is not None:
                return language

        return self.default_language

