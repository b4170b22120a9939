import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from services.finance_service.models import EntryType


class ExpenseCreate(BaseModel):
    description: str = Field(..., min_length=2, max_length=255)
    amount: int = Field(..., gt=0)
    # Defaults to now
    date: Optional[datetime] = None

    model_config = ConfigDict(extra="forbid")


class FinanceEntryResponse(BaseModel):
    """An income or expense row, tagged with its type."""

    id: uuid.UUID
    type: EntryType
    description: str
    amount: int
    date: datetime
    client_id: Optional[uuid.UUID] = None


class MonthlyBreakdown(BaseModel):
    month: str  # YYYY-MM
    income: int = 0
    expenses: int = 0
    net: int = 0


class FinanceSummaryResponse(BaseModel):
    total_income: int
    total_expenses: int
    net_profit: int
    currency: str
    months: list[MonthlyBreakdown]
