"""
Weekly training schedule.

Stored as one ``app_data`` row, ``{"schedule": {day: {time: client_id}}}``.
Saves replace the whole document; concurrent admin edits are last-write-wins.
"""

import uuid
from typing import Iterator

from libs.common.errors import InvalidRequestError
from libs.common.logging import get_logger
from services.clients_service.models import AppData, Client
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

WEEKLY_SCHEDULE_KEY = "weeklySchedule"

DAYS_OF_WEEK = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
# 8:00 through 20:00
TIME_SLOTS = tuple(f"{hour}:00" for hour in range(8, 21))

ScheduleGrid = dict[str, dict[str, str]]


def empty_schedule() -> ScheduleGrid:
    return {day: {} for day in DAYS_OF_WEEK}


def slots_for_client(schedule: ScheduleGrid, client_id: uuid.UUID | str) -> Iterator[tuple[str, str]]:
    """Yield every (day, time) pair assigned to the client."""
    target = str(client_id)
    for day, slots in schedule.items():
        for time, assigned in slots.items():
            if assigned == target:
                yield day, time


async def _get_document(db: AsyncSession) -> AppData | None:
    return await db.get(AppData, WEEKLY_SCHEDULE_KEY)


async def get_schedule(db: AsyncSession) -> ScheduleGrid:
    document = await _get_document(db)
    if document is None:
        return empty_schedule()
    return _grid_from(document)


async def save_schedule(db: AsyncSession, schedule: ScheduleGrid) -> ScheduleGrid:
    """
    Replace the weekly schedule. Empty cells are dropped; every assigned id
    must belong to an existing client.
    """
    cleaned: ScheduleGrid = empty_schedule()
    assigned_ids: set[str] = set()
    for day, slots in schedule.items():
        for time, client_id in slots.items():
            if client_id:
                cleaned[day][time] = str(client_id)
                assigned_ids.add(str(client_id))

    if assigned_ids:
        try:
            wanted = {uuid.UUID(value) for value in assigned_ids}
        except ValueError:
            raise InvalidRequestError("Schedule contains an invalid client id") from None
        result = await db.execute(select(Client.id).where(Client.id.in_(wanted)))
        missing = wanted - set(result.scalars().all())
        if missing:
            raise InvalidRequestError(
                f"Unknown client ids in schedule: {', '.join(sorted(str(m) for m in missing))}"
            )

    await _write(db, cleaned)
    await db.commit()
    logger.info("Weekly schedule saved with %d assigned slots", sum(len(s) for s in cleaned.values()))
    return cleaned


async def remove_client_from_schedule(db: AsyncSession, client_id: uuid.UUID) -> int:
    """Clear every slot assigned to a client. Does not commit."""
    document = await _get_document(db)
    if document is None:
        return 0

    schedule = _grid_from(document)
    removed = 0
    for day, time in list(slots_for_client(schedule, client_id)):
        del schedule[day][time]
        removed += 1
    if removed:
        await _write(db, schedule)
    return removed


def _grid_from(document: AppData) -> ScheduleGrid:
    schedule = empty_schedule()
    for day, slots in (document.data or {}).get("schedule", {}).items():
        schedule[day] = dict(slots)
    return schedule


async def _write(db: AsyncSession, schedule: ScheduleGrid) -> None:
    document = await _get_document(db)
    # Assign a new dict so the JSON column change is detected
    if document is None:
        db.add(AppData(key=WEEKLY_SCHEDULE_KEY, data={"schedule": schedule}))
    else:
        document.data = {"schedule": schedule}
