"""FastAPI application for the Clients Service."""

from fastapi import FastAPI
from libs.common.errors import add_exception_handlers
from libs.common.rate_limit import add_rate_limiting
from services.clients_service.routers import (
    clients_router,
    membership_router,
    schedule_router,
)


def create_app() -> FastAPI:
    """Create and configure the Clients Service FastAPI app."""
    app = FastAPI(
        title="FitCoach Clients Service",
        version="0.1.0",
        description="Client roster, progress logs, weekly schedule and membership lookup.",
    )

    add_rate_limiting(app)
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "clients"}

    app.include_router(clients_router)
    app.include_router(schedule_router)
    app.include_router(membership_router)

    return app


app = create_app()
