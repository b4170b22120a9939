"""FastAPI application entrypoint for the FitCoach gateway service.

Every service shares one database, so the gateway mounts their routers
in-process under ``/api/v1`` rather than proxying over HTTP.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.config import get_settings
from libs.common.errors import add_exception_handlers
from libs.common.middleware import add_observability_middleware
from libs.common.rate_limit import add_rate_limiting
from services.catalog_service.routers import pricing_router, showcase_router
from services.clients_service.routers import (
    clients_router,
    membership_router,
    schedule_router,
)
from services.finance_service.routers import finance_router
from services.gateway_service.app.routers import dashboard_router
from services.orders_service.routers import orders_router, promo_codes_router

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = get_settings()

    app = FastAPI(
        title="FitCoach Gateway Service",
        version="0.1.0",
        description="Public and admin API for the FitCoach coaching business.",
    )

    add_rate_limiting(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability (structured logging + request tracing)
    add_observability_middleware(app)

    # Add global exception handlers for consistent error responses
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple readiness endpoint."""
        return {"status": "ok"}

    for router in (
        pricing_router,
        showcase_router,
        promo_codes_router,
        orders_router,
        clients_router,
        schedule_router,
        membership_router,
        finance_router,
        dashboard_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()
