"""Orders Service models package."""

from services.orders_service.models.core import Order, PromoCode
from services.orders_service.models.enums import (
    ExperienceLevel,
    OrderStatus,
    PrimaryGoal,
    PromoCodeStatus,
)

__all__ = [
    "ExperienceLevel",
    "Order",
    "OrderStatus",
    "PrimaryGoal",
    "PromoCode",
    "PromoCodeStatus",
]
