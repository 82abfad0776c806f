# balancesheet/schemas/goal.py

from datetime import date, datetime
from typing import Optional
from pydantic import Field

from balancesheet.schemas.common import CamelModel


class GoalCreate(CamelModel):
    description: str = Field(..., min_length=1)
    target_amount: float = Field(..., ge=0)
    current_amount: float = Field(..., ge=0)
    target_date: date


class GoalSyncItem(GoalCreate):
    id: Optional[str] = None


class GoalRead(GoalCreate):
    id: str
    user_id: int
    created_at: datetime
