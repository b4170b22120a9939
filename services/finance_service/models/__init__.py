from services.finance_service.models.core import Expense, Transaction
from services.finance_service.models.enums import EntryType

__all__ = [
    "EntryType",
    "Expense",
    "Transaction",
]
