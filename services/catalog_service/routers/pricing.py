"""Pricing plans: public listing and admin CRUD."""

import uuid

from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.errors import ConflictError, NotFoundError
from libs.common.logging import get_logger
from libs.db.session import get_async_db
from services.catalog_service.models import PricingPlan
from services.catalog_service.schemas import (
    PricingPlanCreate,
    PricingPlanResponse,
    PricingPlanUpdate,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["pricing"])
logger = get_logger(__name__)


async def _get_plan_or_404(db: AsyncSession, plan_id: uuid.UUID) -> PricingPlan:
    plan = await db.get(PricingPlan, plan_id)
    if not plan:
        raise NotFoundError("Pricing plan not found")
    return plan


async def _ensure_name_free(
    db: AsyncSession, name: str, exclude_id: uuid.UUID | None = None
) -> None:
    query = select(PricingPlan).where(PricingPlan.name == name)
    if exclude_id is not None:
        query = query.where(PricingPlan.id != exclude_id)
    existing = await db.execute(query)
    if existing.scalar_one_or_none():
        raise ConflictError(f"A plan named '{name}' already exists")


@router.get("/pricing", response_model=list[PricingPlanResponse])
async def list_pricing_plans(db: AsyncSession = Depends(get_async_db)):
    """Public pricing page, shortest plans first."""
    result = await db.execute(
        select(PricingPlan).order_by(PricingPlan.duration_days, PricingPlan.price)
    )
    return result.scalars().all()


@router.post("/admin/pricing", response_model=PricingPlanResponse, status_code=201)
async def create_pricing_plan(
    payload: PricingPlanCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    await _ensure_name_free(db, payload.name)

    plan = PricingPlan(**payload.model_dump())
    db.add(plan)
    await db.commit()
    await db.refresh(plan)
    logger.info("Pricing plan %s created by %s", plan.name, current_user.email)
    return plan


@router.patch("/admin/pricing/{plan_id}", response_model=PricingPlanResponse)
async def update_pricing_plan(
    plan_id: uuid.UUID,
    payload: PricingPlanUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    plan = await _get_plan_or_404(db, plan_id)

    update_data = payload.model_dump(exclude_unset=True)
    if update_data.get("name") and update_data["name"] != plan.name:
        await _ensure_name_free(db, update_data["name"], exclude_id=plan.id)

    for field, value in update_data.items():
        setattr(plan, field, value)

    await db.commit()
    await db.refresh(plan)
    return plan


@router.delete("/admin/pricing/{plan_id}")
async def delete_pricing_plan(
    plan_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    plan = await _get_plan_or_404(db, plan_id)
    await db.delete(plan)
    await db.commit()
    logger.info("Pricing plan %s deleted by %s", plan.name, current_user.email)
    return {"deleted": True}
