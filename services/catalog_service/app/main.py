"""FastAPI application for the Catalog Service."""

from fastapi import FastAPI
from libs.common.errors import add_exception_handlers
from services.catalog_service.routers import pricing_router, showcase_router


def create_app() -> FastAPI:
    """Create and configure the Catalog Service FastAPI app."""
    app = FastAPI(
        title="FitCoach Catalog Service",
        version="0.1.0",
        description="Pricing plans, gallery and achievements.",
    )

    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "catalog"}

    app.include_router(pricing_router)
    app.include_router(showcase_router)

    return app


app = create_app()
