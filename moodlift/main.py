"""
FastAPI application setup.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from sqlalchemy import text

from moodlift.config.settings import get_settings
from moodlift.core.db import dispose_engine, get_session_factory
from moodlift.core.error_handlers import error_handler, setup_error_handlers
from moodlift.core.logging import configure_logging
from moodlift.middleware import AdminKeyMiddleware, LegacyRedirectMiddleware, RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: log startup, dispose the database engine on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if get_session_factory() is None:
        logger.warning("DATABASE_URL is not set; content reads will return empty results")

    try:
        yield
    finally:
        logger.info("Shutting down application")
        try:
            await dispose_engine()
            logger.info("Application shutdown complete")
        except Exception as e:
            logger.error(f"Application shutdown failed: {e}", exc_info=True)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level.value, settings.log_format, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    # added last runs first: request id, redirects, CORS, admin key
    app.add_middleware(AdminKeyMiddleware)
    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
    app.add_middleware(LegacyRedirectMiddleware)
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from moodlift.api.admin_content_endpoints import router as admin_content_router
    from moodlift.api.admin_endpoints import router as admin_router
    from moodlift.api.assessment_endpoints import router as assessment_router
    from moodlift.api.books_endpoints import router as books_router
    from moodlift.api.breathing_endpoints import router as breathing_router
    from moodlift.api.content_endpoints import router as content_router
    from moodlift.api.favorites_endpoints import router as favorites_router
    from moodlift.api.games_endpoints import router as games_router
    from moodlift.api.seo_endpoints import router as seo_router
    app.include_router(favorites_router)
    app.include_router(books_router)
    app.include_router(games_router)
    app.include_router(content_router)
    app.include_router(seo_router)
    app.include_router(breathing_router)
    app.include_router(assessment_router)
    app.include_router(admin_content_router)
    app.include_router(admin_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic health check."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Database reachability plus error counts."""
        database = {"status": "unconfigured"}
        session_factory = get_session_factory()
        if session_factory is not None:
            try:
                async with session_factory() as db:
                    await db.execute(text("SELECT 1"))
                database = {"status": "healthy"}
            except Exception as e:
                logger.error(f"Database health check failed: {e}")
                database = {"status": "unhealthy", "error": str(e)}

        overall = "healthy" if database["status"] == "healthy" else "degraded"
        return {
            "status": overall,
            "version": settings.app_version,
            "environment": settings.environment.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "details": {"database": database},
            "error_statistics": error_handler.get_error_statistics(),
        }

    return app


app = create_app()
