"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from .dependencies import configure_container
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.notes.routes import router as notes_router
from modules.tags.routes import router as tags_router
from modules.dashboard.routes import router as dashboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Builds the service container from ``settings`` and constructs the token
    service right away, so a missing or weak JWT_SECRET stops startup.

    Raises:
        ConfigurationError: If the signing secret is not configured

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    container = configure_container(settings)
    container.tokens  # fail fast on a missing secret

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes with tags, search and cookie sessions",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(notes_router, prefix="/api/notes", tags=["notes"])
    app.include_router(tags_router, prefix="/api/tags", tags=["tags"])
    app.include_router(dashboard_router, prefix="/api/dashboard", tags=["dashboard"])

    return app


# Application instance for uvicorn
app = create_app()
