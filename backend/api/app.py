"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.accounts.routes import router as accounts_router
from modules.messaging.routes import router as messaging_router
from modules.profiles.routes import router as profiles_router

from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        "Starting %s on %s:%s (%s)",
        settings.app_name, settings.host, settings.port, settings.environment,
    )
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; authenticated requests will be rejected")
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Profile sharing API with accounts, access control and messaging",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

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
    app.include_router(accounts_router, prefix="/api", tags=["accounts"])
    app.include_router(messaging_router, prefix="/api", tags=["messaging"])
    app.include_router(profiles_router, prefix="/api/profiles", tags=["profiles"])

    return app


# Application instance for uvicorn
app = create_app()
