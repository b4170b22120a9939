"""Public membership lookup by code."""

from datetime import date
from typing import Optional

from libs.common.logging import get_logger
from services.clients_service.models import Client
from services.clients_service.schemas import MembershipLookupResponse, ScheduleSlot
from services.clients_service.services.membership import (
    compute_days_left,
    compute_status_label,
    normalize_membership_code,
)
from services.clients_service.services.schedule import get_schedule, slots_for_client
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


async def get_client_by_code(db: AsyncSession, code: str) -> Client | None:
    normalized = normalize_membership_code(code)
    if not normalized:
        return None
    result = await db.execute(
        select(Client).where(Client.membership_code == normalized)
    )
    return result.scalar_one_or_none()


async def lookup_membership(
    db: AsyncSession, code: str, today: Optional[date] = None
) -> MembershipLookupResponse:
    """Read-only projection of a client and their weekly sessions."""
    client = await get_client_by_code(db, code)
    if client is None:
        logger.info("Membership lookup miss for code %r", normalize_membership_code(code))
        return MembershipLookupResponse(found=False)

    schedule = await get_schedule(db)
    # Counted from end_date even while paused; the label reports the pause.
    # The admin roster shows the frozen count instead (remaining_days).
    days_left = compute_days_left(client.end_date, today)

    return MembershipLookupResponse(
        found=True,
        full_name=client.full_name,
        plan=client.plan,
        end_date=client.end_date,
        status=client.status,
        days_left=days_left,
        status_label=compute_status_label(client.status, days_left),
        current_goal_title=client.current_goal_title,
        target_metric=client.target_metric,
        target_value=client.target_value,
        target_date=client.target_date,
        schedule=[
            ScheduleSlot(day=day, time=time)
            for day, time in slots_for_client(schedule, client.id)
        ],
    )
