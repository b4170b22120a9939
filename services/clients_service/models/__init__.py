"""Clients Service models package."""

from services.clients_service.models.core import AppData, Client, ProgressLog
from services.clients_service.models.enums import ClientStatus, ProgressCategory

__all__ = [
    "AppData",
    "Client",
    "ClientStatus",
    "ProgressCategory",
    "ProgressLog",
]
