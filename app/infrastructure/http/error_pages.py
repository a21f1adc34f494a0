"""Error page rendering.

A post-processing stage over finished responses: responses whose status code
is watched get their body replaced by the rendered error page, or by a plain
text message when the error page itself cannot be rendered.
"""

from http import HTTPStatus
from typing import AbstractSet, Mapping, Optional

from fastapi import Response

from infrastructure.http.responses import html_response, plain_text_response
from infrastructure.i18n import SupportedLanguage
from infrastructure.logging import get_module_logger
from infrastructure.templating import (
    ERROR_TEMPLATE,
    ErrorContext,
    TemplateStore,
    render_template,
)

logger = get_module_logger()

ERROR_MESSAGES: Mapping[int, str] = {
    404: "Page Not Found",
    400: "Bad Request",
    500: "Ops! Something is wrong, please try again later.",
}

WATCHED_STATUS_CODES: AbstractSet[int] = frozenset(ERROR_MESSAGES)

# Error pages are not negotiated; they always use the default language.
ERROR_PAGE_LANGUAGE = SupportedLanguage.default()


def error_message(status_code: int) -> str:
    """Return the human-readable message for a status code.

    Watched codes use the fixed message table; any other code falls back to
    its standard reason phrase.
    """
    if status_code in ERROR_MESSAGES:
        return ERROR_MESSAGES[status_code]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def render_error_response(
    store: TemplateStore,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Render the error page for a watched status code.

    Falls back to a ``text/plain`` body holding the message when the error
    template is missing or fails to render. The fallback does no template
    lookup.

    Args:
        store: Template store holding ``error.html``.
        status_code: Watched HTTP status code.
        headers: Headers of the original response to carry over.

    Returns:
        Response with the same status code and a non-empty body.
    """
    message = error_message(status_code)
    context = ErrorContext(
        lang=ERROR_PAGE_LANGUAGE.value,
        error=message,
        status_code=str(status_code),
    )

    result = render_template(store, ERROR_TEMPLATE, context)
    if result.is_success:
        logger.info("error_template_rendered", status_code=status_code)
        return html_response(result.body, status_code=status_code, headers=headers)

    logger.warning(
        "error_template_render_failed",
        status_code=status_code,
        error=str(result.error),
        fallback="text/plain",
    )
    return plain_text_response(message, status_code=status_code, headers=headers)


def intercept(
    response: Response,
    store: TemplateStore,
    watched: AbstractSet[int] = WATCHED_STATUS_CODES,
) -> Response:
    """Replace the body of a response carrying a watched error status.

    Unwatched status codes are returned unchanged. Watched ones keep their
    status code and non-body headers; the body becomes the rendered error
    page (``text/html``) or its plain text fallback (``text/plain``).

    Args:
        response: Fully formed response from any handler.
        store: Template store holding ``error.html``.
        watched: Status codes to rewrite.

    Returns:
        The original response, or a new one with the error page body.
    """
    status_code = response.status_code
    if status_code not in watched:
        return response

    return render_error_response(store, status_code, headers=response.headers)
