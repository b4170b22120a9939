"""Promo codes: public validation and admin management."""

import uuid

from fastapi import APIRouter, Depends, Request
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.errors import NotFoundError, ServiceError
from libs.common.logging import get_logger
from libs.common.rate_limit import public_limit
from libs.db.session import get_async_db
from services.orders_service.models import PromoCode
from services.orders_service.schemas import (
    PromoCodeCreate,
    PromoCodeResponse,
    PromoCodeValidateRequest,
    PromoCodeValidateResponse,
)
from services.orders_service.services.promo_codes import (
    create_promo_code,
    validate_promo_code,
)
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["promo-codes"])
logger = get_logger(__name__)


@router.post("/promo-codes/validate", response_model=PromoCodeValidateResponse)
@public_limit
async def validate_code(
    request: Request,
    payload: PromoCodeValidateRequest,
    db: AsyncSession = Depends(get_async_db),
):
    """
    Check a promo code from the subscription form.
    Does NOT mark the code as used.
    """
    try:
        promo = await validate_promo_code(db, payload.code)
    except ServiceError as exc:
        return PromoCodeValidateResponse(success=False, message=exc.detail)

    return PromoCodeValidateResponse(
        success=True,
        promo_code=PromoCodeResponse.model_validate(promo),
        message=f"Applied {promo.discount_percentage}% discount.",
    )


@router.post("/admin/promo-codes", response_model=PromoCodeResponse, status_code=201)
async def create_code(
    payload: PromoCodeCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Create a promo code (Admin only). A code is generated when none is given."""
    promo = await create_promo_code(
        db, code=payload.code, discount_percentage=payload.discount_percentage
    )
    logger.info(
        "Promo code %s (%d%%) created by %s",
        promo.code,
        promo.discount_percentage,
        current_user.email,
    )
    return promo


@router.get("/admin/promo-codes", response_model=list[PromoCodeResponse])
async def list_codes(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    result = await db.execute(select(PromoCode).order_by(desc(PromoCode.created_at)))
    return result.scalars().all()


@router.get("/admin/promo-codes/{promo_id}", response_model=PromoCodeResponse)
async def get_code(
    promo_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    promo = await db.get(PromoCode, promo_id)
    if not promo:
        raise NotFoundError("Promo code not found")
    return promo


@router.delete("/admin/promo-codes/{promo_id}")
async def delete_code(
    promo_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    promo = await db.get(PromoCode, promo_id)
    if not promo:
        raise NotFoundError("Promo code not found")

    await db.delete(promo)
    await db.commit()
    return {"deleted": True}
