import logging
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import httpx

from balancesheet.core import config
from balancesheet.models.user import User
from balancesheet.repositories.users import UserRepository

logger = logging.getLogger(__name__)

AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"
SCOPES = [
    "https://www.googleapis.com/auth/userinfo.profile",
    "https://www.googleapis.com/auth/userinfo.email",
]
GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class GoogleAuthError(Exception):
    pass


@dataclass(frozen=True)
class GoogleIdentity:
    sub: str
    email: str
    name: Optional[str] = None
    picture: Optional[str] = None


def _json_object(response: httpx.Response) -> dict:
    try:
        payload = response.json()
    except ValueError as exc:
        raise GoogleAuthError(f"Non-JSON response from {response.url.host}{response.url.path}") from exc
    if not isinstance(payload, dict):
        raise GoogleAuthError(f"Unexpected response from {response.url.host}{response.url.path}")
    return payload


def _require_config() -> None:
    if not config.google_oauth_configured():
        raise GoogleAuthError("Google OAuth configuration is missing")


def build_authorization_url() -> str:
    _require_config()
    params = {
        "client_id": config.GOOGLE_CLIENT_ID,
        "redirect_uri": config.GOOGLE_REDIRECT_URI,
        "response_type": "code",
        "scope": " ".join(SCOPES),
        "access_type": "offline",
        "prompt": "consent",
    }
    return f"{AUTH_URL}?{urlencode(params)}"


async def exchange_code(code: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> GoogleIdentity:
    """Cambia el código de autorización por un id_token y lo valida con Google."""
    _require_config()

    async with httpx.AsyncClient(timeout=10, transport=transport) as client:
        r = await client.post(
            TOKEN_URL,
            data={
                "code": code,
                "client_id": config.GOOGLE_CLIENT_ID,
                "client_secret": config.GOOGLE_CLIENT_SECRET,
                "redirect_uri": config.GOOGLE_REDIRECT_URI,
                "grant_type": "authorization_code",
            },
        )
        r.raise_for_status()
        id_token = _json_object(r).get("id_token")
        if not id_token:
            raise GoogleAuthError("Token response without id_token")

        r = await client.get(TOKENINFO_URL, params={"id_token": id_token})
        r.raise_for_status()
        claims = _json_object(r)

    if claims.get("aud") != config.GOOGLE_CLIENT_ID:
        raise GoogleAuthError("ID token audience mismatch")
    if claims.get("iss") not in GOOGLE_ISSUERS:
        raise GoogleAuthError("ID token issuer mismatch")
    if not claims.get("sub"):
        raise GoogleAuthError("Invalid token payload")
    if not claims.get("email"):
        raise GoogleAuthError("Email is required from Google OAuth")

    return GoogleIdentity(
        sub=claims["sub"],
        email=claims["email"],
        name=claims.get("name"),
        picture=claims.get("picture"),
    )


def default_username(email: str) -> str:
    local_part = email.split("@")[0]
    return local_part or f"user_{int(time.time() * 1000)}"


def sign_in_google_user(users: UserRepository, identity: GoogleIdentity) -> User:
    """
    Busca al usuario por su id de Google; si no existe, vincula la cuenta local
    con el mismo email o crea una cuenta nueva sin contraseña.
    Siempre actualiza last_login.
    """
    user = users.get_by_google_id(identity.sub)

    if not user:
        existing = users.get_by_email(identity.email)
        if existing:
            logger.info("Linking Google identity to existing user %s", existing.id)
            user = users.update(
                existing,
                google_id=identity.sub,
                google_name=identity.name,
                google_picture=identity.picture,
            )
        else:
            user = users.create_google_user(
                username=users.available_username(default_username(identity.email)),
                email=identity.email,
                google_id=identity.sub,
                google_name=identity.name,
                google_picture=identity.picture,
            )

    return users.touch_last_login(user)
