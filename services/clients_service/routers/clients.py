"""Admin roster management: goals, resources, lifecycle and progress logs."""

import uuid

from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.clients_service.models import ProgressLog
from services.clients_service.schemas import (
    ClientResponse,
    ExtendRequest,
    GoalUpdate,
    ProgressLogCreate,
    ProgressLogResponse,
    ResourcesUpdate,
)
from services.clients_service.services.subscription import (
    delete_client,
    extend_client,
    get_client_or_404,
    list_clients,
    pause_client,
    resume_client,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/admin/clients", tags=["clients"])
logger = get_logger(__name__)


@router.get("", response_model=list[ClientResponse])
async def list_all_clients(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List clients, newest first, with days left and status label."""
    clients = await list_clients(db)
    return [ClientResponse.from_client(client) for client in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    client = await get_client_or_404(db, client_id)
    return ClientResponse.from_client(client)


@router.delete("/{client_id}")
async def remove_client(
    client_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Delete a client, their progress logs and their weekly-schedule slots."""
    await delete_client(db, client_id)
    return {"deleted": True}


# ---------------------------------------------------------------------------
# Goal & resources
# ---------------------------------------------------------------------------


@router.patch("/{client_id}/goal", response_model=ClientResponse)
async def update_goal(
    client_id: uuid.UUID,
    payload: GoalUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    client = await get_client_or_404(db, client_id)
    for field, value in payload.model_dump().items():
        setattr(client, field, value)
    await db.commit()
    await db.refresh(client)
    return ClientResponse.from_client(client)


@router.patch("/{client_id}/resources", response_model=ClientResponse)
async def update_resources(
    client_id: uuid.UUID,
    payload: ResourcesUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Set or clear the nutrition plan and training program links."""
    client = await get_client_or_404(db, client_id)
    for field, value in payload.model_dump(mode="json", exclude_unset=True).items():
        setattr(client, field, value)
    await db.commit()
    await db.refresh(client)
    return ClientResponse.from_client(client)


# ---------------------------------------------------------------------------
# Subscription lifecycle
# ---------------------------------------------------------------------------


@router.post("/{client_id}/extend", response_model=ClientResponse)
async def extend_subscription(
    client_id: uuid.UUID,
    payload: ExtendRequest,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    client = await extend_client(
        db, client_id, months=payload.months, days=payload.days
    )
    return ClientResponse.from_client(client)


@router.post("/{client_id}/pause", response_model=ClientResponse)
async def pause_subscription(
    client_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Freeze the remaining days. 409 if already paused."""
    client = await pause_client(db, client_id)
    return ClientResponse.from_client(client)


@router.post("/{client_id}/resume", response_model=ClientResponse)
async def resume_subscription(
    client_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Restart the frozen days from today. 409 if not paused."""
    client = await resume_client(db, client_id)
    return ClientResponse.from_client(client)


# ---------------------------------------------------------------------------
# Progress logs
# ---------------------------------------------------------------------------


@router.get("/{client_id}/progress-logs", response_model=list[ProgressLogResponse])
async def list_progress_logs(
    client_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    await get_client_or_404(db, client_id)
    result = await db.execute(
        select(ProgressLog)
        .where(ProgressLog.client_id == client_id)
        .order_by(ProgressLog.created_at.desc())
    )
    return result.scalars().all()


@router.post(
    "/{client_id}/progress-logs", response_model=ProgressLogResponse, status_code=201
)
async def add_progress_log(
    client_id: uuid.UUID,
    payload: ProgressLogCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    await get_client_or_404(db, client_id)
    log = ProgressLog(client_id=client_id, note=payload.note, category=payload.category)
    db.add(log)
    await db.commit()
    await db.refresh(log)
    logger.info("Progress log (%s) added for client %s", log.category.value, client_id)
    return log
