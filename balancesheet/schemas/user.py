from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from balancesheet.schemas.common import CamelModel


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)
    email: EmailStr


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthUser(BaseModel):
    id: int
    username: str


class AuthResponse(BaseModel):
    token: str
    user: AuthUser


class UserRead(CamelModel):
    id: int
    username: str
    email: str
    google_name: Optional[str] = None
    google_picture: Optional[str] = None
    created_at: datetime
    last_login: Optional[datetime] = None


class GoogleAuthUrl(BaseModel):
    url: str
