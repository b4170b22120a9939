"""Subscription orders: public intake and admin approval/rejection."""

import uuid
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.errors import ServiceError
from libs.common.rate_limit import public_limit
from libs.db.session import get_async_db
from services.clients_service.schemas import ClientResponse
from services.orders_service.schemas import (
    OrderApprovalRequest,
    OrderResponse,
    SubscriptionOrderCreate,
    SubscriptionOrderResult,
)
from services.orders_service.services.order_service import (
    approve_order,
    list_pending_orders,
    reject_order,
    submit_order,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["orders"])

ORDER_RECEIVED_MESSAGE = "Application Sent! Your coach will review it shortly."


@router.post("/orders", response_model=SubscriptionOrderResult)
@public_limit
async def create_subscription_order(
    request: Request,
    payload: SubscriptionOrderCreate,
    db: AsyncSession = Depends(get_async_db),
):
    """Submit the public subscription form as a pending order."""
    try:
        order = await submit_order(db, payload)
    except ServiceError as exc:
        return SubscriptionOrderResult(success=False, message=exc.detail)

    return SubscriptionOrderResult(
        success=True,
        message=ORDER_RECEIVED_MESSAGE,
        order_id=order.id,
        final_price=order.final_price,
    )


@router.get("/admin/orders", response_model=list[OrderResponse])
async def list_orders(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """List pending orders, newest first (Admin only)."""
    return await list_pending_orders(db)


@router.post("/admin/orders/{order_id}/approve", response_model=ClientResponse)
async def approve(
    order_id: uuid.UUID,
    payload: Optional[OrderApprovalRequest] = Body(default=None),
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Approve an order: create the client, record income, consume the promo code."""
    client = await approve_order(
        db,
        order_id,
        start_date=payload.start_date if payload else None,
        approved_by=current_user.email,
    )
    return ClientResponse.from_client(client)


@router.delete("/admin/orders/{order_id}")
async def reject(
    order_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Reject and delete a pending order (Admin only)."""
    await reject_order(db, order_id)
    return {"deleted": True}
