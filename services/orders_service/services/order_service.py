"""
Order intake and the admin approval workflow.

Approval turns a pending order into a client. It writes the ``clients``,
``transactions`` and ``promo_codes`` tables and deletes the order in a single
database transaction. Nothing is committed unless every step succeeds.
"""

import uuid
from datetime import date
from typing import Optional

from libs.common.datetime_utils import add_months, local_today
from libs.common.errors import ConflictError, InvalidRequestError, NotFoundError
from libs.common.logging import get_logger
from services.catalog_service.models import PricingPlan
from services.clients_service.models import Client, ClientStatus
from services.clients_service.services.membership import derive_membership_code
from services.finance_service.models import Transaction
from services.orders_service.models import Order, OrderStatus
from services.orders_service.schemas import SubscriptionOrderCreate
from services.orders_service.services.pricing import compute_final_price
from services.orders_service.services.promo_codes import (
    consume_promo_code,
    normalize_code,
    validate_promo_code,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)


class OrderNotFound(NotFoundError):
    default_detail = "Order not found"


class UnknownPlan(InvalidRequestError):
    default_detail = "Selected plan is not available."


MAX_CODE_ATTEMPTS = 5


async def _new_client_identity(db: AsyncSession) -> tuple[uuid.UUID, str]:
    """Pick a client id whose derived membership code is not already taken."""
    for _ in range(MAX_CODE_ATTEMPTS):
        client_id = uuid.uuid4()
        code = derive_membership_code(client_id)
        taken = await db.scalar(select(Client.id).where(Client.membership_code == code))
        if taken is None:
            return client_id, code
        logger.warning("Membership code %s already taken, regenerating", code)
    raise ConflictError("Could not allocate a unique membership code")


async def submit_order(db: AsyncSession, payload: SubscriptionOrderCreate) -> Order:
    """
    Persist a pending order from the public form.

    The promo code is validated but not consumed. The stored price is
    recomputed from the plan, duration and promo rather than taken from the
    form.
    """
    result = await db.execute(
        select(PricingPlan).where(PricingPlan.name == payload.preferred_plan)
    )
    plan = result.scalar_one_or_none()
    if plan is None:
        raise UnknownPlan()

    promo_code = None
    promo_percentage = None
    if payload.promo_code and payload.promo_code.strip():
        promo = await validate_promo_code(db, payload.promo_code)
        promo_code = promo.code
        promo_percentage = promo.discount_percentage

    final_price = compute_final_price(
        plan.price, payload.subscription_duration, promo_percentage
    )
    if payload.final_price is not None and payload.final_price != final_price:
        logger.warning(
            "Submitted price %s for %s does not match computed price %s; storing computed price",
            payload.final_price,
            payload.email,
            final_price,
        )

    order = Order(
        **payload.model_dump(exclude={"promo_code", "final_price"}),
        promo_code=promo_code,
        final_price=final_price,
        status=OrderStatus.PENDING,
    )
    db.add(order)
    await db.commit()
    await db.refresh(order)

    logger.info(
        "Order %s submitted by %s: plan=%s duration=%d promo=%s price=%d",
        order.id,
        order.email,
        order.preferred_plan,
        order.subscription_duration,
        order.promo_code,
        final_price,
    )
    return order


async def list_pending_orders(db: AsyncSession) -> list[Order]:
    result = await db.execute(
        select(Order)
        .where(Order.status == OrderStatus.PENDING)
        .order_by(Order.created_at.desc())
    )
    return list(result.scalars().all())


async def _get_pending_order(
    db: AsyncSession, order_id: uuid.UUID, *, for_update: bool = False
) -> Order:
    query = select(Order).where(Order.id == order_id)
    if for_update:
        query = query.with_for_update()
    result = await db.execute(query)
    order = result.scalar_one_or_none()
    if order is None or order.status != OrderStatus.PENDING:
        raise OrderNotFound()
    return order


async def approve_order(
    db: AsyncSession,
    order_id: uuid.UUID,
    *,
    start_date: Optional[date] = None,
    approved_by: Optional[str] = None,
) -> Client:
    """Approve a pending order, all-or-nothing.

    1. Lock the order (must exist and be pending)
    2. end_date = start_date + subscription_duration calendar months
    3. Create the client with a membership code derived from its id
    4. Record an income transaction when the order has a positive price
    5. Lock, re-check and consume the promo code
    6. Delete the order and commit
    """
    try:
        order = await _get_pending_order(db, order_id, for_update=True)

        start = start_date or local_today()
        months = order.subscription_duration or 1
        end = add_months(start, months)

        client_id, membership_code = await _new_client_identity(db)
        client = Client(
            id=client_id,
            membership_code=membership_code,
            full_name=order.full_name,
            email=order.email,
            phone_number=order.phone_number,
            plan=order.preferred_plan,
            primary_goal=order.primary_goal.value,
            notes=order.injuries_or_notes,
            start_date=start,
            end_date=end,
            status=ClientStatus.ACTIVE,
        )
        db.add(client)

        if order.final_price and order.final_price > 0:
            db.add(
                Transaction(
                    description=f"Subscription: {order.full_name}",
                    amount=order.final_price,
                    client_id=client_id,
                )
            )

        if order.promo_code:
            await consume_promo_code(
                db, normalize_code(order.promo_code), order_id=order.id
            )

        await db.delete(order)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    await db.refresh(client)
    logger.info(
        "Order %s approved by %s: client %s (%s) active until %s",
        order_id,
        approved_by,
        client.id,
        client.membership_code,
        client.end_date,
    )
    return client


async def reject_order(db: AsyncSession, order_id: uuid.UUID) -> None:
    """Reject (delete) a pending order. Its promo code stays active."""
    order = await _get_pending_order(db, order_id)
    await db.delete(order)
    await db.commit()
    logger.info("Order %s rejected", order_id)
