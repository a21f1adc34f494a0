from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.gzip import GZipMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import Settings, load_settings
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.templating import TemplateStore, build_template_store
from server.lifespan import lifespan
from server.middleware import (
    DefaultHeadersMiddleware,
    ErrorPageMiddleware,
    RequestContextMiddleware,
)

logger = get_module_logger()


def _mount_static(app: FastAPI, settings: Settings) -> None:
    static_dir = Path(settings.server.STATIC_DIR)
    if not settings.server.STATIC_ENABLED:
        return
    if not static_dir.is_dir():
        logger.info("static_files_skipped", static_dir=str(static_dir))
        return
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    logger.info("static_files_mounted", static_dir=str(static_dir))


def create_app(
    settings: Optional[Settings] = None,
    template_store: Optional[TemplateStore] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Configuration and templates are validated here, once, before any request
    is served.

    Args:
        settings: Pre-validated settings. Loaded from the environment if omitted.
        template_store: Pre-built template store. Built from
            ``settings.landing.TEMPLATES_DIR`` if omitted.

    Returns:
        Configured FastAPI application.

    Raises:
        ConfigurationError: If required configuration is missing.
        TemplateStoreError: If the templates cannot be loaded or compiled.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings=settings)

    if template_store is None:
        template_store = build_template_store(settings.landing.TEMPLATES_DIR)

    app = FastAPI(
        title="Landing Page",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.template_store = template_store

    setup_rate_limiter(app)

    # Last added runs first: gzip wraps everything, error pages sit closest
    # to the routes.
    app.add_middleware(ErrorPageMiddleware, template_store=template_store)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(DefaultHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    _mount_static(app, settings)
    app.include_router(api_router)

    return app
