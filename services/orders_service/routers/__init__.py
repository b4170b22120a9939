"""Routers package."""

from services.orders_service.routers.orders import router as orders_router
from services.orders_service.routers.promo_codes import router as promo_codes_router

__all__ = [
    "orders_router",
    "promo_codes_router",
]
