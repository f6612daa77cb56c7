"""Meal requests: one per (meal, user); pending until an admin serves it."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateRequestError, NotFoundError
from app.models import Meal, MealRequest
from app.models.meal_request import REQUEST_STATUS_PENDING, REQUEST_STATUS_SERVING
from app.schemas.meal_request import MealRequestCreate

logger = logging.getLogger(__name__)


def request_exists(session: Session, meal_id: int, user_email: str) -> bool:
    return (
        session.query(MealRequest.id)
        .filter(MealRequest.meal_id == meal_id, MealRequest.user_email == user_email)
        .first()
        is not None
    )


def create_request(session: Session, body: MealRequestCreate) -> MealRequest:
    """
    Place a pending request. Raises NotFoundError for an unknown meal and
    DuplicateRequestError when this user already requested the meal.
    """
    meal = session.get(Meal, body.meal_id)
    if meal is None:
        raise NotFoundError("Meal not found")
    if request_exists(session, body.meal_id, body.user_email):
        raise DuplicateRequestError("Already requested")
    request = MealRequest(
        meal_id=meal.id,
        meal_title=body.meal_title or meal.title,
        user_email=body.user_email,
        user_name=body.user_name,
        status=REQUEST_STATUS_PENDING,
        requested_at=datetime.now(UTC),
    )
    session.add(request)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise DuplicateRequestError("Already requested", cause=e) from e
    session.refresh(request)
    return request


def list_requests(
    session: Session,
    offset: int,
    limit: int,
    user_email: str | None = None,
    keyword: str | None = None,
) -> tuple[list[MealRequest], int]:
    """
    One page of requests and the total.

    user_email filters exactly; keyword matches the requester's email case-insensitively.
    """
    query = session.query(MealRequest)
    if user_email is not None:
        query = query.filter(MealRequest.user_email == user_email)
    if keyword:
        query = query.filter(MealRequest.user_email.ilike(f"%{keyword}%"))
    total = query.count()
    requests = query.order_by(MealRequest.id).offset(offset).limit(limit).all()
    return requests, total


def serve_request(session: Session, request_id: int) -> MealRequest:
    request = session.get(MealRequest, request_id)
    if request is None:
        raise NotFoundError("Meal request not found")
    request.status = REQUEST_STATUS_SERVING
    session.commit()
    logger.info("Meal request served", extra={"meal_request_id": request_id})
    return request


def delete_request(session: Session, request_id: int) -> None:
    request = session.get(MealRequest, request_id)
    if request is None:
        raise NotFoundError("Meal request not found")
    session.delete(request)
    session.commit()
