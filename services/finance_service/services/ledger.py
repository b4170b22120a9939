"""
Income and expense ledger.

Income rows come from order approval; expenses are entered by the admin.
The monthly breakdown is computed in Python so it runs the same on every
database backend. Months follow the business timezone.
"""

import uuid
from collections import defaultdict
from datetime import datetime, timezone

from libs.common.config import get_settings
from libs.common.datetime_utils import to_local
from libs.common.errors import NotFoundError
from libs.common.logging import get_logger
from services.finance_service.models import EntryType, Expense, Transaction
from services.finance_service.schemas import (
    ExpenseCreate,
    FinanceEntryResponse,
    FinanceSummaryResponse,
    MonthlyBreakdown,
)
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = get_logger(__name__)

MODELS_BY_TYPE = {
    EntryType.INCOME: Transaction,
    EntryType.EXPENSE: Expense,
}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_entry(row: Transaction | Expense, entry_type: EntryType) -> FinanceEntryResponse:
    return FinanceEntryResponse(
        id=row.id,
        type=entry_type,
        description=row.description,
        amount=row.amount,
        date=_as_utc(row.date),
        client_id=getattr(row, "client_id", None),
    )


async def list_entries(db: AsyncSession) -> list[FinanceEntryResponse]:
    """All income and expense rows, newest first."""
    income = (await db.execute(select(Transaction))).scalars().all()
    expenses = (await db.execute(select(Expense))).scalars().all()

    entries = [to_entry(row, EntryType.INCOME) for row in income]
    entries += [to_entry(row, EntryType.EXPENSE) for row in expenses]
    entries.sort(key=lambda entry: entry.date, reverse=True)
    return entries


async def record_expense(db: AsyncSession, payload: ExpenseCreate) -> Expense:
    expense = Expense(description=payload.description, amount=payload.amount)
    if payload.date is not None:
        expense.date = payload.date
    db.add(expense)
    await db.commit()
    await db.refresh(expense)
    logger.info("Expense recorded: %s (%d)", expense.description, expense.amount)
    return expense


async def delete_entry(db: AsyncSession, entry_type: EntryType, entry_id: uuid.UUID) -> None:
    model = MODELS_BY_TYPE[entry_type]
    row = await db.get(model, entry_id)
    if row is None:
        raise NotFoundError(f"{entry_type.value.capitalize()} entry not found")
    await db.delete(row)
    await db.commit()
    logger.info("Deleted %s entry %s", entry_type.value, entry_id)


async def build_summary(db: AsyncSession) -> FinanceSummaryResponse:
    months: dict[str, MonthlyBreakdown] = defaultdict(lambda: MonthlyBreakdown(month=""))

    for entry in await list_entries(db):
        key = to_local(entry.date).strftime("%Y-%m")
        bucket = months[key]
        bucket.month = key
        if entry.type == EntryType.INCOME:
            bucket.income += entry.amount
        else:
            bucket.expenses += entry.amount

    for bucket in months.values():
        bucket.net = bucket.income - bucket.expenses

    total_income = sum(bucket.income for bucket in months.values())
    total_expenses = sum(bucket.expenses for bucket in months.values())
    return FinanceSummaryResponse(
        total_income=total_income,
        total_expenses=total_expenses,
        net_profit=total_income - total_expenses,
        currency=get_settings().CURRENCY,
        months=sorted(months.values(), key=lambda bucket: bucket.month, reverse=True),
    )
