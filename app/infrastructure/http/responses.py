"""Response builders.

Assemble HTTP responses (status, content type, body) from render output.
"""

from typing import List, Mapping, Optional, Tuple

from fastapi import Response
from starlette.datastructures import Headers

HTML_MEDIA_TYPE = "text/html"
PLAIN_TEXT_MEDIA_TYPE = "text/plain"

# Headers describing the body; recomputed whenever the body is replaced.
_BODY_HEADERS = frozenset({"content-type", "content-length", "content-encoding"})


def _header_items(headers: Optional[Mapping[str, str]]) -> List[Tuple[str, str]]:
    """List header pairs, keeping repeated headers such as Set-Cookie."""
    if headers is None:
        return []
    if isinstance(headers, Headers):
        return list(headers.items())
    return list(headers.items())


def build_response(
    status_code: int,
    body: bytes,
    media_type: str,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Build a response with an explicit body and content type.

    Args:
        status_code: HTTP status code.
        body: Response body bytes.
        media_type: Content type without charset; UTF-8 is appended for text.
        headers: Extra headers. Body-describing headers are ignored;
            repeated headers in a Headers instance are all kept.

    Returns:
        Response ready to be sent.
    """
    response = Response(content=body, status_code=status_code, media_type=media_type)
    response.raw_headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in _header_items(headers)
        if name.lower() not in _BODY_HEADERS
    )
    return response


def html_response(
    body: bytes,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    return build_response(status_code, body, HTML_MEDIA_TYPE, headers)


def plain_text_response(
    message: str,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    return build_response(
        status_code, message.encode("utf-8"), PLAIN_TEXT_MEDIA_TYPE, headers
    )


def empty_response(status_code: int) -> Response:
    """Build a bodiless response, e.g. a 500 the error pages stage will fill."""
    return Response(status_code=status_code)
