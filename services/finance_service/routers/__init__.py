"""Routers package."""

from services.finance_service.routers.finance import router as finance_router

__all__ = ["finance_router"]
