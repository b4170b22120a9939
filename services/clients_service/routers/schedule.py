from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.clients_service.schemas import WeeklySchedule, WeeklyScheduleResponse
from services.clients_service.services.schedule import get_schedule, save_schedule
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/admin/schedule", tags=["schedule"])


@router.get("", response_model=WeeklyScheduleResponse)
async def read_schedule(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return WeeklyScheduleResponse(schedule=await get_schedule(db))


@router.put("", response_model=WeeklyScheduleResponse)
async def replace_schedule(
    payload: WeeklySchedule,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Replace the whole weekly schedule. Last write wins."""
    schedule = await save_schedule(db, payload.schedule)
    return WeeklyScheduleResponse(schedule=schedule)
