"""Session cookie endpoints and auth dependencies (get_token_claims, require_roles)."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.security import (
    create_session_token,
    decode_session_token,
    session_cookie_params,
)
from app.models.user import ROLE_USER
from app.schemas.auth import CurrentUser, SessionRequest, SessionResponse, TokenClaims
from app.services.users import get_user_by_email

logger = logging.getLogger(__name__)
router = APIRouter()
cookie_scheme = APIKeyCookie(name=settings.AUTH_COOKIE_NAME, auto_error=False)


@router.post("/jwt", response_model=SessionResponse)
def issue_session(
    body: SessionRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> SessionResponse:
    """
    Issue a one-day session token for the signed-in user and set it as an HTTP-only cookie.

    The role claim is taken from the user store (defaulting to 'user' before
    registration), never from the request body.
    """
    user = get_user_by_email(db, body.email)
    role = user.role if user is not None else ROLE_USER
    token = create_session_token({"email": body.email, "role": role})
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        **session_cookie_params(settings),
    )
    return SessionResponse(success=True)


@router.post("/logout", response_model=SessionResponse)
def clear_session(response: Response) -> SessionResponse:
    """
    Clear the session cookie on the client.

    The token itself stays valid until it expires; there is no server-side session to revoke.
    """
    response.delete_cookie(
        settings.AUTH_COOKIE_NAME,
        **session_cookie_params(settings),
    )
    return SessionResponse(success=True)


def get_token_claims(
    token: Annotated[str | None, Depends(cookie_scheme)],
) -> TokenClaims:
    """
    Dependency: require a valid session cookie and return its decoded claims.

    401 when the cookie is absent, 403 for any invalid, tampered or expired token
    (the reason is not disclosed), 500 if verification itself fails unexpectedly.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized Access: No token",
        )
    try:
        payload = decode_session_token(token)
    except jwt.PyJWTError as e:
        logger.info("Rejected session token", extra={"reason": type(e).__name__})
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Invalid token",
        )
    except Exception as e:
        logger.exception("Token verification error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )
    return TokenClaims(email=payload.get("email"), role=payload.get("role"))


def require_roles(*allowed_roles: str) -> Callable[..., CurrentUser]:
    """
    Build a dependency that admits only users whose stored role is in allowed_roles.

    The role is re-read from the user store on every request, so a role change
    applies at once even to tokens issued earlier; the token's role claim is ignored.
    """
    allowed = frozenset(allowed_roles)

    def role_gate(
        claims: Annotated[TokenClaims, Depends(get_token_claims)],
        db: Annotated[Session, Depends(get_db)],
    ) -> CurrentUser:
        if not claims.email:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized: Missing email in token",
            )
        user = get_user_by_email(db, claims.email)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        if user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access Denied: Role restricted",
            )
        return CurrentUser.model_validate(user)

    return role_gate


require_admin = require_roles("admin")
require_user = require_roles("user")
