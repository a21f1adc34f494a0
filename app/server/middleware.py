import time
from typing import AbstractSet, Mapping

from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.http import WATCHED_STATUS_CODES, empty_response, intercept
from infrastructure.logging import (
    CORRELATION_ID_HEADER,
    bind_request_context,
    get_module_logger,
)

logger = get_module_logger()

SECURITY_HEADERS: Mapping[str, str] = {
    "X-DNS-Prefetch-Control": "off",
    "X-XSS-Protection": "1; mode=block",
    "X-Content-Type-Options": "nosniff",
}


class ErrorPageMiddleware(BaseHTTPMiddleware):
    """Runs every finished response through the error page interceptor.

    Unhandled exceptions are logged and turned into a 500 first, so they get
    the error page too.
    """

    def __init__(
        self, app, template_store, watched: AbstractSet[int] = WATCHED_STATUS_CODES
    ):
        super().__init__(app)
        self.template_store = template_store
        self.watched = watched

    async def dispatch(self, request, call_next):
        try:
            response = await call_next(request)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception(
                "unhandled_request_error",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            response = empty_response(500)
        return intercept(response, self.template_store, self.watched)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a correlation ID to the logs of each request and echoes it back."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            logger.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


class DefaultHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, headers: Mapping[str, str] = SECURITY_HEADERS):
        super().__init__(app)
        self.headers = dict(headers)

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
