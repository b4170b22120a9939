"""Catalog Service models package."""

from services.catalog_service.models.core import Achievement, GalleryItem, PricingPlan

__all__ = [
    "Achievement",
    "GalleryItem",
    "PricingPlan",
]
