# balancesheet/schemas/asset.py

from datetime import datetime
from typing import Optional
from pydantic import Field

from balancesheet.schemas.common import CamelModel


class AssetCreate(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    value: float = Field(..., ge=0)
    income_generated: float = Field(..., ge=0)
    notes: Optional[str] = None


class AssetSyncItem(AssetCreate):
    id: Optional[str] = None


class AssetRead(AssetCreate):
    id: str
    user_id: int
    created_at: datetime
