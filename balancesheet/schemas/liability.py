# balancesheet/schemas/liability.py

from datetime import datetime
from typing import Optional
from pydantic import Field

from balancesheet.schemas.common import CamelModel


class LiabilityCreate(CamelModel):
    description: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)
    interest_rate: float = Field(..., ge=0, description="Tasa en porcentaje")
    notes: Optional[str] = None


class LiabilitySyncItem(LiabilityCreate):
    id: Optional[str] = None


class LiabilityRead(LiabilityCreate):
    id: str
    user_id: int
    created_at: datetime
