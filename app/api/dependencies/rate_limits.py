from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

limiter = Limiter(
    key_func=get_remote_address,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Return a 429 with a short message when a route limit is exceeded."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )
    raise exc


def setup_rate_limiter(app: FastAPI):
    """
    Attach the shared limiter to the application and register its 429 handler.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
