"""HTTP response helpers - response builders and error page interception.

Main components:
- responses: html_response, plain_text_response, build_response
- error_pages: intercept, render_error_response, ERROR_MESSAGES
"""

from infrastructure.http.error_pages import (
    ERROR_MESSAGES,
    ERROR_PAGE_LANGUAGE,
    WATCHED_STATUS_CODES,
    error_message,
    intercept,
    render_error_response,
)
from infrastructure.http.responses import (
    HTML_MEDIA_TYPE,
    PLAIN_TEXT_MEDIA_TYPE,
    build_response,
    empty_response,
    html_response,
    plain_text_response,
)

__all__ = [
    "ERROR_MESSAGES",
    "ERROR_PAGE_LANGUAGE",
    "WATCHED_STATUS_CODES",
    "error_message",
    "intercept",
    "render_error_response",
    "HTML_MEDIA_TYPE",
    "PLAIN_TEXT_MEDIA_TYPE",
    "build_response",
    "empty_response",
    "html_response",
    "plain_text_response",
]
