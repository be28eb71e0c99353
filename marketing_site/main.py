import logging

from fastapi import FastAPI

from marketing_site.config import settings
from marketing_site.exception_handlers import register_exception_handlers
from marketing_site.middleware.locale import LocaleRedirectMiddleware
from marketing_site.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from marketing_site.routes import pages, seo
from marketing_site.routes.i18n import i18n_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    setup_structured_logging(log_level=settings.log_level, json_format=settings.json_logs)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    # Starlette middleware is LIFO: logging wraps locale redirects
    app.add_middleware(LocaleRedirectMiddleware, portal_url=settings.owner_portal_url)
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    # Fixed paths first, the /{locale} wildcards last
    app.include_router(i18n_router)
    app.include_router(seo.router)
    app.include_router(pages.router)

    logger.info("Application created (environment=%s)", settings.environment)
    return app


app = create_app()
