import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno desde .env si existe

DEFAULT_SECRET_KEY = "change-me-in-production"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./balance_sheet.db")
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"

SECRET_KEY = os.getenv("JWT_SECRET", DEFAULT_SECRET_KEY)
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
GOOGLE_REDIRECT_URI = os.getenv("GOOGLE_REDIRECT_URI", "http://localhost:5000/auth/google/callback")

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
OPENROUTER_URL = os.getenv("OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "meta-llama/llama-4-maverick:free")
# OpenRouter identifica la app por el Referer
OPENROUTER_REFERER = os.getenv("OPENROUTER_REFERER", FRONTEND_URL)

PORT = int(os.getenv("PORT", "5000"))
# Vercel and similar platforms bind the socket themselves
MANAGED_HOSTING = os.getenv("VERCEL") == "1"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def google_oauth_configured() -> bool:
    return bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET and GOOGLE_REDIRECT_URI)


def describe_environment() -> dict:
    """Resumen de la configuración apto para logs (sin secretos)."""
    return {
        "database": DATABASE_URL.split("://", 1)[0],
        "jwt_secret_is_default": SECRET_KEY == DEFAULT_SECRET_KEY,
        "google_oauth_configured": google_oauth_configured(),
        "google_redirect_uri": GOOGLE_REDIRECT_URI,
        "openrouter_key_set": bool(OPENROUTER_API_KEY),
        "frontend_url": FRONTEND_URL,
        "managed_hosting": MANAGED_HOSTING,
    }
