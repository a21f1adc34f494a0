"""Landing page route.

Serves the localized index page. The language comes from the ``lang`` query
parameter when it names a supported language, otherwise from the
Accept-Language header, otherwise English.
"""

import time
from typing import Annotated, Optional

from fastapi import APIRouter, Header, Query, Response
from fastapi.responses import HTMLResponse

from infrastructure.http import empty_response, html_response
from infrastructure.i18n import LanguageResolver
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    LanguageResolverDep,
    SettingsDep,
    TemplateStoreDep,
)
from infrastructure.templating import (
    INDEX_TEMPLATE,
    IndexContext,
    TemplateStore,
    render_template,
)

logger = get_module_logger()

router = APIRouter(tags=["Landing"])


def render_index_page(
    store: TemplateStore,
    resolver: LanguageResolver,
    color: str,
    query_lang: Optional[str] = None,
    accept_language: Optional[str] = None,
) -> Response:
    """Resolve the language and render the index page.

    A render failure yields an empty 500 that the error page stage fills in;
    the index template is never rendered twice for one request.

    Args:
        store: Template store holding ``index.html``.
        resolver: Language resolver.
        color: Display color from configuration.
        query_lang: ``lang`` query parameter, if any.
        accept_language: Accept-Language header, if any.

    Returns:
        200 ``text/html`` response with the rendered page, or an empty 500.
    """
    started = time.perf_counter()

    language = resolver.resolve(query_lang, accept_language)
    context = IndexContext(lang=language.value, color=color)
    result = render_template(store, INDEX_TEMPLATE, context)

    duration_ms = round((time.perf_counter() - started) * 1000, 3)

    if not result.is_success:
        logger.error(
            "index_render_failed",
            language=language.value,
            error=str(result.error),
            duration_ms=duration_ms,
        )
        return empty_response(500)

    logger.info(
        "index_page_dispatched",
        language=language.value,
        duration_ms=duration_ms,
    )
    return html_response(result.body)


@router.get("/", response_class=HTMLResponse)
def landing_page(
    settings: SettingsDep,
    store: TemplateStoreDep,
    resolver: LanguageResolverDep,
    lang: Annotated[Optional[str], Query()] = None,
    accept_language: Annotated[Optional[str], Header()] = None,
):
    """
    Landing page.

    Any ``lang`` value is accepted; unsupported values fall through to
    Accept-Language negotiation.

    Returns:
        HTMLResponse: Localized index page
    """
    return render_index_page(
        store,
        resolver,
        color=settings.landing.COLOR,
        query_lang=lang,
        accept_language=accept_language,
    )
