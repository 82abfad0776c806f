# balancesheet/schemas/income.py

from datetime import datetime
from typing import Optional
from pydantic import Field

from balancesheet.models.enums import IncomeFrequency, IncomeType
from balancesheet.schemas.common import CamelModel


class IncomeCreate(CamelModel):
    source: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, description="Monto no negativo")
    type: IncomeType
    frequency: IncomeFrequency
    notes: Optional[str] = None


class IncomeSyncItem(IncomeCreate):
    id: Optional[str] = None


class IncomeRead(IncomeCreate):
    id: str
    user_id: int
    created_at: datetime
