"""Promo code lookup, validation, generation and consumption."""

import random
import string
import uuid

from libs.common.config import get_settings
from libs.common.datetime_utils import utc_now
from libs.common.errors import ConflictError, InvalidRequestError, NotFoundError
from libs.common.logging import get_logger
from services.orders_service.models import PromoCode, PromoCodeStatus
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

RANDOM_PART_LENGTH = 6


class PromoCodeNotFound(NotFoundError):
    default_detail = "This promo code does not exist."


class PromoCodeAlreadyUsed(ConflictError):
    default_detail = "This promo code has already been used."


class EmptyPromoCode(InvalidRequestError):
    default_detail = "Promo code cannot be empty."


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def generate_code(prefix: str | None = None) -> str:
    """Random code such as ``AKRAM7KQ2ZD``."""
    prefix = get_settings().PROMO_CODE_PREFIX if prefix is None else prefix
    alphabet = string.ascii_uppercase + string.digits
    return prefix.upper() + "".join(random.choices(alphabet, k=RANDOM_PART_LENGTH))


async def get_promo_code(
    db: AsyncSession, code: str, *, for_update: bool = False
) -> PromoCode | None:
    query = select(PromoCode).where(PromoCode.code == normalize_code(code))
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def validate_promo_code(db: AsyncSession, code: str | None) -> PromoCode:
    """
    Check that a code exists and is still active. Case-insensitive.
    Has no side effects; consumption happens only during order approval.
    """
    normalized = normalize_code(code)
    if not normalized:
        raise EmptyPromoCode()

    promo = await get_promo_code(db, normalized)
    if promo is None:
        raise PromoCodeNotFound()
    if promo.status != PromoCodeStatus.ACTIVE:
        raise PromoCodeAlreadyUsed()
    return promo


async def consume_promo_code(
    db: AsyncSession, code: str, *, order_id: uuid.UUID
) -> PromoCode:
    """
    Lock the code row, re-check it is active and mark it used.

    Must run inside the caller's transaction; the caller commits or rolls back.
    The row lock is what stops two approvals redeeming the same code.
    """
    promo = await get_promo_code(db, code, for_update=True)
    if promo is None:
        raise PromoCodeNotFound("Promo code no longer exists")
    if promo.status != PromoCodeStatus.ACTIVE:
        raise PromoCodeAlreadyUsed("Promo code has already been used")

    promo.status = PromoCodeStatus.USED
    promo.used_by_order_id = order_id
    promo.used_at = utc_now()
    logger.info("Promo code %s consumed by order %s", promo.code, order_id)
    return promo


async def create_promo_code(
    db: AsyncSession, *, code: str | None, discount_percentage: int
) -> PromoCode:
    normalized = normalize_code(code) or generate_code()
    if await get_promo_code(db, normalized):
        raise ConflictError("This code already exists.")

    promo = PromoCode(
        code=normalized,
        discount_percentage=discount_percentage,
        status=PromoCodeStatus.ACTIVE,
    )
    db.add(promo)
    await db.commit()
    await db.refresh(promo)
    return promo
