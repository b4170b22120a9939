"""Enum definitions for finance service models."""

import enum


class EntryType(str, enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"
