"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillhand_admin.api.dependencies import close_backend
from skillhand_admin.api.middleware.error_handler import add_error_handlers
from skillhand_admin.api.middleware.logging import LoggingMiddleware
from skillhand_admin.api.routes import (
    auth,
    dashboard,
    employee_applications,
    health,
    service_requests,
)
from skillhand_admin.config.logging import get_logger
from skillhand_admin.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Application startup",
        environment=settings.ENVIRONMENT,
        backend=settings.API_BASE_URL,
    )
    try:
        yield
    finally:
        await close_backend()
        logger.info("Application shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Admin console for SkillHand service requests and applicants",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)
    LoggingMiddleware(app)

    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(service_requests.router, prefix=settings.API_PREFIX)
    app.include_router(employee_applications.router, prefix=settings.API_PREFIX)
    app.include_router(dashboard.router, prefix=settings.API_PREFIX)

    return app
