"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holding.config import Settings
from holding.interface.api.routes import (
    auth,
    bags,
    health,
    invitations,
    items,
    realtime,
)
from holding.interface.error import register_error_handlers
from holding.util.di.container import create_container, setup_di
from holding.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this. A container passed in must
    have been built from the same settings.
    """
    settings = settings or Settings()

    # Swagger UI only in development
    docs_url = "/swagger" if settings.is_development else None

    app_instance = FastAPI(
        title="Bag of Holding API",
        description="Shared bags of items with link-based invitations",
        version=settings.app.version,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(bags.router)
    app_instance.include_router(items.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(realtime.router)

    return app_instance
