"""
Membership codes and the derived subscription fields shown to clients.
"""

import uuid
from datetime import date
from typing import Optional

from libs.common.datetime_utils import days_between, local_today
from services.clients_service.models import Client, ClientStatus

MEMBERSHIP_CODE_LENGTH = 8


def derive_membership_code(client_id: uuid.UUID | str) -> str:
    """First 8 characters of the client id, upper-cased."""
    return str(client_id)[:MEMBERSHIP_CODE_LENGTH].upper()


def normalize_membership_code(code: str) -> str:
    return (code or "").strip().upper()


def compute_days_left(end_date: date, today: Optional[date] = None) -> int:
    return max(0, days_between(today or local_today(), end_date))


def remaining_days(client: Client, today: Optional[date] = None) -> int:
    """Days left on the subscription; frozen at the pause-time count while paused."""
    if client.status == ClientStatus.PAUSED:
        return client.days_left_on_pause or 0
    return compute_days_left(client.end_date, today)


def compute_status_label(status: ClientStatus, days_left: int) -> str:
    if status == ClientStatus.PAUSED:
        return "paused"
    if days_left <= 0:
        return "expired"
    return "active"
