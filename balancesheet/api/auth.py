import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from balancesheet.core import config
from balancesheet.core.security import authenticate_user, create_access_token, get_password_hash
from balancesheet.database import get_session
from balancesheet.repositories.users import UserRepository
from balancesheet.schemas.user import AuthResponse, AuthUser, GoogleAuthUrl, LoginRequest, RegisterRequest
from balancesheet.services.google_oauth import (
    GoogleAuthError,
    build_authorization_url,
    exchange_code,
    sign_in_google_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user) -> AuthResponse:
    token = create_access_token(user.id, user.username)
    return AuthResponse(token=token, user=AuthUser(id=user.id, username=user.username))


# Registro
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, session: Session = Depends(get_session)):
    users = UserRepository(session)
    if users.get_by_username(payload.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if users.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = users.create(payload.username, payload.email, get_password_hash(payload.password))
    return _auth_response(user)


# Login
@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, session: Session = Depends(get_session)):
    user = authenticate_user(UserRepository(session), payload.username, payload.password)
    return _auth_response(user)


@router.get("/google/url", response_model=GoogleAuthUrl)
def google_auth_url():
    try:
        return GoogleAuthUrl(url=build_authorization_url())
    except GoogleAuthError as exc:
        logger.error("Error generating Google OAuth URL: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/google/callback")
async def google_callback(code: Optional[str] = None, session: Session = Depends(get_session)):
    # Cualquier fallo termina en la página de error del frontend
    try:
        if not code:
            raise GoogleAuthError("No authorization code received")
        identity = await exchange_code(code)
        user = await run_in_threadpool(sign_in_google_user, UserRepository(session), identity)
    except (GoogleAuthError, httpx.HTTPError, SQLAlchemyError) as exc:
        logger.error("Error in Google OAuth callback: %s", exc)
        return RedirectResponse(f"{config.FRONTEND_URL}/auth?error=google_auth_failed")

    token = create_access_token(user.id, user.username)
    return RedirectResponse(f"{config.FRONTEND_URL}/auth/callback?token={token}")
