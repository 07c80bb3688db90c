# backend/estate_board/services/auth.py
import hmac
from datetime import datetime, timedelta, timezone

import jwt

from ..config import Settings


class AuthError(Exception):
    pass


def check_password(password: str, settings: Settings) -> bool:
    if not settings.APP_PASSWORD:
        return False
    return hmac.compare_digest(password.encode("utf-8"), settings.APP_PASSWORD.encode("utf-8"))


def create_access_token(settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": "team",
        "iat": now,
        "exp": now + timedelta(hours=settings.TOKEN_EXPIRE_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str, settings: Settings) -> dict:
    """Decode and validate a bearer token. Raises AuthError when expired or invalid"""
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")
