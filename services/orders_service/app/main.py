"""FastAPI application for the Orders Service."""

from fastapi import FastAPI
from libs.common.errors import add_exception_handlers
from libs.common.rate_limit import add_rate_limiting
from services.orders_service.routers import orders_router, promo_codes_router


def create_app() -> FastAPI:
    """Create and configure the Orders Service FastAPI app."""
    app = FastAPI(
        title="FitCoach Orders Service",
        version="0.1.0",
        description="Promo codes, subscription orders and order approval.",
    )

    add_rate_limiting(app)
    add_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "orders"}

    app.include_router(promo_codes_router)
    app.include_router(orders_router)

    return app


app = create_app()
