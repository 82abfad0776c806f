from decimal import Decimal
from sqlalchemy import Column, Numeric
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4

from balancesheet.utils.dates import utcnow


class Liability(SQLModel, table=True):
    __tablename__ = "liabilities"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    description: str
    type: str  # texto libre: "Mortgage", "Credit Card", ...
    amount: Decimal = Field(sa_column=Column(Numeric, nullable=False))
    interest_rate: Decimal = Field(sa_column=Column(Numeric, nullable=False))  # En porcentaje anual
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
