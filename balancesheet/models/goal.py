from decimal import Decimal
from sqlalchemy import Column, Numeric
from sqlmodel import SQLModel, Field
from datetime import date, datetime
from uuid import uuid4

from balancesheet.utils.dates import utcnow


class Goal(SQLModel, table=True):
    __tablename__ = "goals"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    description: str
    target_amount: Decimal = Field(sa_column=Column(Numeric, nullable=False))
    current_amount: Decimal = Field(sa_column=Column(Numeric, nullable=False))
    target_date: date
    created_at: datetime = Field(default_factory=utcnow)
