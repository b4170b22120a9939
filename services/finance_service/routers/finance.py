"""Finance screen: income and expense ledger (Admin only)."""

import uuid

from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.db.session import get_async_db
from services.finance_service.models import EntryType
from services.finance_service.schemas import (
    ExpenseCreate,
    FinanceEntryResponse,
    FinanceSummaryResponse,
)
from services.finance_service.services.ledger import (
    build_summary,
    delete_entry,
    list_entries,
    record_expense,
    to_entry,
)
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/admin/finance", tags=["finance"])


@router.get("/transactions", response_model=list[FinanceEntryResponse])
async def list_transactions(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Income and expenses merged, newest first."""
    return await list_entries(db)


@router.post("/expenses", response_model=FinanceEntryResponse, status_code=201)
async def create_expense(
    payload: ExpenseCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    expense = await record_expense(db, payload)
    return to_entry(expense, EntryType.EXPENSE)


@router.delete("/{entry_type}/{entry_id}")
async def delete_transaction(
    entry_type: EntryType,
    entry_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    await delete_entry(db, entry_type, entry_id)
    return {"deleted": True}


@router.get("/summary", response_model=FinanceSummaryResponse)
async def get_summary(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    """Totals and a per-month (YYYY-MM) breakdown."""
    return await build_summary(db)
