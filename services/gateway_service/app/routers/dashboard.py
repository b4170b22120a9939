from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from pydantic import BaseModel
from services.clients_service.models import Client, ClientStatus
from services.orders_service.models import Order, OrderStatus
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["dashboard"])


class AdminDashboardStats(BaseModel):
    pending_orders: int
    total_clients: int
    active_clients: int


@router.get("/admin/dashboard/stats", response_model=AdminDashboardStats)
async def get_admin_dashboard_stats(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Counts shown on the admin home screen."""
    pending_orders = (
        await db.execute(
            select(func.count())
            .select_from(Order)
            .where(Order.status == OrderStatus.PENDING)
        )
    ).scalar() or 0
    total_clients = (
        await db.execute(select(func.count()).select_from(Client))
    ).scalar() or 0
    active_clients = (
        await db.execute(
            select(func.count())
            .select_from(Client)
            .where(Client.status == ClientStatus.ACTIVE)
        )
    ).scalar() or 0

    return AdminDashboardStats(
        pending_orders=pending_orders,
        total_clients=total_clients,
        active_clients=active_clients,
    )
