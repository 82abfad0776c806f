import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from balancesheet.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from balancesheet.models.user import User
from balancesheet.repositories.users import UserRepository

logger = logging.getLogger(__name__)

# Manejo de contraseñas
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: el 401 lo armamos nosotros con el mensaje de la API
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class CurrentUser:
    id: int
    username: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: int, username: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": str(user_id), "username": username, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> CurrentUser:
    """Lanza ExpiredSignatureError / JWTError si el token no es válido."""
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    user_id = payload.get("sub")
    username = payload.get("username")
    if user_id is None or username is None:
        raise JWTError("Token without subject")
    try:
        return CurrentUser(id=int(user_id), username=username)
    except ValueError as exc:
        raise JWTError("Malformed subject") from exc


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> CurrentUser:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(token)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError as exc:
        logger.warning("Rejected token: %s", exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")


def authenticate_user(users: UserRepository, username: str, password: str) -> User:
    """
    Valida usuario y contraseña. Usuario inexistente, cuenta sin contraseña
    (solo Google) o contraseña incorrecta dan exactamente el mismo error.
    """
    user = users.get_by_username(username)
    if not user or not user.password:
        # Mismo costo de bcrypt que una verificación real
        pwd_context.dummy_verify()
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if not verify_password(password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    return users.touch_last_login(user)
