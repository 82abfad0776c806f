from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from balancesheet.utils.dates import utcnow


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    # None en cuentas creadas con Google que nunca definieron contraseña
    password: Optional[str] = None
    email: str = Field(index=True, unique=True)
    google_id: Optional[str] = Field(default=None, unique=True, index=True)
    google_name: Optional[str] = None
    google_picture: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    last_login: Optional[datetime] = None
