from decimal import Decimal
from sqlalchemy import Column, Numeric
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4

from balancesheet.utils.dates import utcnow


class Expense(SQLModel, table=True):
    __tablename__ = "expenses"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    category: str
    amount: Decimal = Field(sa_column=Column(Numeric, nullable=False))
    description: str
    date: datetime
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
