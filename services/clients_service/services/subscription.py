"""
Subscription lifecycle for approved clients: pause, resume and extend.

Pausing freezes the remaining days; resuming starts them again from today.
"""

import uuid
from datetime import date, timedelta
from typing import Optional

from libs.common.datetime_utils import add_months, local_today
from libs.common.errors import ConflictError, NotFoundError
from libs.common.logging import get_logger
from services.clients_service.models import Client, ClientStatus, ProgressLog
from services.clients_service.services.membership import compute_days_left
from services.clients_service.services.schedule import remove_client_from_schedule
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


class ClientNotFound(NotFoundError):
    default_detail = "Client not found"


class ClientAlreadyPaused(ConflictError):
    default_detail = "Subscription is already paused"


class ClientNotPaused(ConflictError):
    default_detail = "Subscription is not paused"


async def get_client_or_404(db: AsyncSession, client_id: uuid.UUID) -> Client:
    client = await db.get(Client, client_id)
    if client is None:
        raise ClientNotFound()
    return client


async def list_clients(db: AsyncSession) -> list[Client]:
    result = await db.execute(select(Client).order_by(Client.created_at.desc()))
    return list(result.scalars().all())


def pause(client: Client, today: Optional[date] = None) -> Client:
    if client.status == ClientStatus.PAUSED:
        logger.warning("Pause rejected for client %s: already paused", client.id)
        raise ClientAlreadyPaused()

    client.days_left_on_pause = compute_days_left(client.end_date, today)
    client.status = ClientStatus.PAUSED
    return client


def resume(client: Client, today: Optional[date] = None) -> Client:
    if client.status != ClientStatus.PAUSED:
        logger.warning("Resume rejected for client %s: not paused", client.id)
        raise ClientNotPaused()

    today = today or local_today()
    client.end_date = today + timedelta(days=client.days_left_on_pause or 0)
    client.days_left_on_pause = None
    client.status = ClientStatus.ACTIVE
    return client


def extend(
    client: Client,
    *,
    months: Optional[int] = None,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> Client:
    """Push end_date forward from whichever is later: the current end or today."""
    if client.status == ClientStatus.PAUSED:
        logger.warning("Extend rejected for client %s: paused", client.id)
        raise ConflictError("Resume the subscription before extending it")

    today = today or local_today()
    base = max(client.end_date, today)
    if months:
        client.end_date = add_months(base, months)
    else:
        client.end_date = base + timedelta(days=days or 0)
    return client


async def pause_client(
    db: AsyncSession, client_id: uuid.UUID, today: Optional[date] = None
) -> Client:
    client = await get_client_or_404(db, client_id)
    pause(client, today)
    await db.commit()
    await db.refresh(client)
    logger.info(
        "Client %s paused with %d days left", client.id, client.days_left_on_pause
    )
    return client


async def resume_client(
    db: AsyncSession, client_id: uuid.UUID, today: Optional[date] = None
) -> Client:
    client = await get_client_or_404(db, client_id)
    resume(client, today)
    await db.commit()
    await db.refresh(client)
    logger.info("Client %s resumed until %s", client.id, client.end_date)
    return client


async def extend_client(
    db: AsyncSession,
    client_id: uuid.UUID,
    *,
    months: Optional[int] = None,
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> Client:
    client = await get_client_or_404(db, client_id)
    extend(client, months=months, days=days, today=today)
    await db.commit()
    await db.refresh(client)
    logger.info("Client %s extended until %s", client.id, client.end_date)
    return client


async def delete_client(db: AsyncSession, client_id: uuid.UUID) -> None:
    """Delete a client with its progress logs and weekly-schedule slots."""
    client = await get_client_or_404(db, client_id)
    try:
        await db.execute(delete(ProgressLog).where(ProgressLog.client_id == client_id))
        removed_slots = await remove_client_from_schedule(db, client_id)
        await db.delete(client)
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Client %s deleted (%d schedule slots cleared)", client_id, removed_slots)
