"""
Upcoming-meal workflow: submission, one like per user, and promotion to the catalog.

A like is recorded under a row lock on the upcoming meal, and the
(upcoming_meal_id, email) unique constraint makes a second like from the same
email fail even if two requests race. When the like count reaches the
threshold the meal is moved into the catalog inside the same transaction, so
it is never visible in both tables.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import (
    DuplicateVoteError,
    InternalFaultError,
    NotFoundError,
    ValidationError,
)
from app.models import Meal, UpcomingMeal, UpcomingMealLike
from app.models.meal import MEAL_DESCRIPTIVE_FIELDS
from app.models.upcoming_meal import STATUS_UPCOMING
from app.schemas.upcoming_meal import VoteResult

logger = logging.getLogger(__name__)

REQUIRED_CANDIDATE_FIELDS = MEAL_DESCRIPTIVE_FIELDS


def submit_candidate(session: Session, payload: dict[str, Any]) -> UpcomingMeal:
    """
    Insert a new upcoming meal with zeroed counters.

    Raises ValidationError if any required descriptive field is missing or null;
    nothing is inserted in that case.
    """
    if any(payload.get(field) is None for field in REQUIRED_CANDIDATE_FIELDS):
        raise ValidationError("Missing required fields")

    candidate = UpcomingMeal(
        **{field: payload[field] for field in MEAL_DESCRIPTIVE_FIELDS},
        status=STATUS_UPCOMING,
        likes=0,
        rating=0,
        reviews_count=0,
        posted_at=datetime.now(UTC),
    )
    session.add(candidate)
    session.commit()
    session.refresh(candidate)
    logger.info(
        "Upcoming meal submitted",
        extra={"upcoming_meal_id": candidate.id, "distributor_email": candidate.distributor_email},
    )
    return candidate


def _has_voted(session: Session, candidate_id: int, voter_email: str) -> bool:
    return (
        session.query(UpcomingMealLike.id)
        .filter(
            UpcomingMealLike.upcoming_meal_id == candidate_id,
            UpcomingMealLike.email == voter_email,
        )
        .first()
        is not None
    )


def promote(session: Session, candidate: UpcomingMeal) -> Meal:
    """
    Move an upcoming meal into the catalog: insert the published copy, delete the candidate.

    Votes and status are dropped; likes, rating and reviews_count start again at 0.
    Runs inside the caller's transaction; the caller commits.
    """
    meal = Meal(
        **{field: getattr(candidate, field) for field in MEAL_DESCRIPTIVE_FIELDS},
        likes=0,
        rating=0,
        reviews_count=0,
        posted_at=datetime.now(UTC),
    )
    session.add(meal)
    session.delete(candidate)
    session.flush()
    return meal


def register_vote(
    session: Session,
    candidate_id: int,
    voter_email: str,
    threshold: int,
) -> VoteResult:
    """
    Record one like from voter_email and publish the meal once likes reach threshold.

    Raises NotFoundError if the upcoming meal does not exist, DuplicateVoteError if this
    email already liked it, InternalFaultError if the meal vanished after the increment.
    """
    candidate = (
        session.query(UpcomingMeal)
        .filter(UpcomingMeal.id == candidate_id)
        .with_for_update()
        .first()
    )
    if candidate is None:
        raise NotFoundError("Meal not found")

    if _has_voted(session, candidate_id, voter_email):
        session.rollback()
        raise DuplicateVoteError("You already liked this meal")

    session.add(UpcomingMealLike(upcoming_meal_id=candidate_id, email=voter_email))
    try:
        session.flush()
    except IntegrityError as e:
        session.rollback()
        raise DuplicateVoteError("You already liked this meal", cause=e) from e

    session.query(UpcomingMeal).filter(UpcomingMeal.id == candidate_id).update(
        {UpcomingMeal.likes: UpcomingMeal.likes + 1},
        synchronize_session=False,
    )

    updated = (
        session.query(UpcomingMeal)
        .populate_existing()
        .filter(UpcomingMeal.id == candidate_id)
        .first()
    )
    if updated is None:
        session.rollback()
        raise InternalFaultError("Failed to retrieve updated meal.")

    if updated.likes >= threshold:
        meal = promote(session, updated)
        session.commit()
        logger.info(
            "Upcoming meal published",
            extra={
                "upcoming_meal_id": candidate_id,
                "meal_id": meal.id,
                "threshold": threshold,
            },
        )
        return VoteResult(published=True)

    likes = updated.likes
    session.commit()
    return VoteResult(published=False, updated_likes=likes)


def list_candidates(session: Session) -> list[UpcomingMeal]:
    return session.query(UpcomingMeal).order_by(UpcomingMeal.posted_at.desc(), UpcomingMeal.id.desc()).all()


def list_candidates_by_likes(
    session: Session, offset: int, limit: int
) -> tuple[list[UpcomingMeal], int]:
    """Return one page of upcoming meals, most liked first, and the total count."""
    total = session.query(UpcomingMeal).count()
    items = (
        session.query(UpcomingMeal)
        .order_by(UpcomingMeal.likes.desc(), UpcomingMeal.id)
        .offset(offset)
        .limit(limit)
        .all()
    )
    return items, total


def delete_candidate(session: Session, candidate_id: int) -> int:
    """Delete an upcoming meal and its likes. Returns the number of rows deleted (0 or 1)."""
    candidate = session.get(UpcomingMeal, candidate_id)
    if candidate is None:
        return 0
    session.delete(candidate)
    session.commit()
    return 1
