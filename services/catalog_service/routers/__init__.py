"""Routers package."""

from services.catalog_service.routers.pricing import router as pricing_router
from services.catalog_service.routers.showcase import router as showcase_router

__all__ = [
    "pricing_router",
    "showcase_router",
]
