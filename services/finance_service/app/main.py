"""FastAPI application for the Finance Service."""

from fastapi import FastAPI
from libs.common.errors import add_exception_handlers
from services.finance_service.routers import finance_router


def create_app() -> FastAPI:
    """Create and configure the Finance Service FastAPI app."""
    app = FastAPI(
        title="FitCoach Finance Service",
        version="0.1.0",
        description="Income, expenses and the finance summary.",
    )

    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "finance"}

    app.include_router(finance_router)

    return app


app = create_app()
