# balancesheet/schemas/expense.py

from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from balancesheet.schemas.common import CamelModel
from balancesheet.utils.dates import normalize_dt


class ExpenseCreate(CamelModel):
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    description: str = Field(..., min_length=1)
    date: datetime
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return normalize_dt(value)


class ExpenseSyncItem(ExpenseCreate):
    id: Optional[str] = None


class ExpenseRead(ExpenseCreate):
    id: str
    user_id: int
    created_at: datetime
