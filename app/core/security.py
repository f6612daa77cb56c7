"""Session token (JWT) creation/verification and session cookie attributes."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import jwt

from app.core.config import settings

if TYPE_CHECKING:
    from app.core.config import Settings


def create_session_token(claims: dict[str, Any]) -> str:
    """
    Create a signed session token carrying the given claims (email, role) plus iat and exp.

    The expiry is absolute: JWT_EXPIRE_MINUTES (one day by default) from issuance.
    """
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        **claims,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_session_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a session token; return its payload (email, role, exp, iat).
    Raises jwt.PyJWTError on invalid, tampered or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )


def session_cookie_params(cfg: "Settings") -> dict[str, Any]:
    """Cookie flags shared by issue and clear: cross-site in prod, strict same-site otherwise."""
    return {
        "httponly": True,
        "secure": cfg.is_production,
        "samesite": "none" if cfg.is_production else "strict",
    }
