"""User directory: idempotent registration, lookups, search and role changes."""

import logging

from sqlalchemy import ColumnElement, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models import User
from app.models.user import ROLE_USER, ROLES

logger = logging.getLogger(__name__)


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.query(User).filter(User.email == email).first()


def register_user(
    session: Session, email: str, name: str = "", photo: str | None = None
) -> tuple[User, bool]:
    """
    Create the user on first sign-in. Returns (user, inserted).

    A second call with the same email is a no-op and returns the existing user with inserted=False.
    """
    existing = get_user_by_email(session, email)
    if existing is not None:
        return existing, False
    user = User(email=email, name=name, photo=photo, role=ROLE_USER)
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # Concurrent first sign-in for the same email won the insert
        session.rollback()
        return session.query(User).filter(User.email == email).one(), False
    session.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user, True


def get_role(session: Session, email: str) -> str:
    """Return the stored role for email. Raises NotFoundError for unknown users."""
    user = get_user_by_email(session, email)
    if user is None:
        raise NotFoundError("User not found")
    return user.role or ROLE_USER


def update_role(session: Session, user_id: int, role: str | None) -> User:
    """
    Set a user's role. Raises ValidationError for a missing or unknown role and
    NotFoundError when the user does not exist or already has that role.
    """
    if not role or role not in ROLES:
        raise ValidationError("Invalid or missing role.")
    user = session.get(User, user_id)
    if user is None or user.role == role:
        raise NotFoundError("User not found or role unchanged.")
    previous = user.role
    user.role = role
    session.commit()
    logger.info(
        "User role updated",
        extra={"user_id": user_id, "previous_role": previous, "role": role},
    )
    return user


def _keyword_filter(keyword: str) -> ColumnElement[bool]:
    pattern = f"%{keyword}%"
    return or_(User.name.ilike(pattern), User.email.ilike(pattern))


def search_users(session: Session, keyword: str) -> list[User]:
    """Case-insensitive match on name or email. Raises ValidationError for a blank keyword."""
    keyword = (keyword or "").strip()
    if not keyword:
        raise ValidationError("Search keyword is required.")
    return session.query(User).filter(_keyword_filter(keyword)).order_by(User.id).all()


def list_users(
    session: Session, keyword: str, offset: int, limit: int
) -> tuple[list[User], int]:
    """One page of users matching keyword (all users when keyword is blank) and the total."""
    query = session.query(User)
    keyword = (keyword or "").strip()
    if keyword:
        query = query.filter(_keyword_filter(keyword))
    total = query.count()
    users = query.order_by(User.id).offset(offset).limit(limit).all()
    return users, total
