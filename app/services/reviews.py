"""Meal reviews; keeps each meal's reviews_count and average rating in step."""

import logging
from datetime import UTC, datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models import Meal, Review
from app.schemas.review import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)


def _refresh_meal_rating(session: Session, meal: Meal) -> None:
    average = (
        session.query(func.avg(Review.rating)).filter(Review.meal_id == meal.id).scalar()
    )
    meal.rating = round(float(average), 2) if average is not None else 0


def create_review(session: Session, meal_id: int, body: ReviewCreate) -> Review:
    """
    Add a review and bump the meal's reviews_count.

    Raises ValidationError when user, email, comment or rating is missing and
    NotFoundError when the meal does not exist.
    """
    if not body.user or not body.email or not body.comment or body.rating is None:
        raise ValidationError("Missing review fields")
    meal = session.get(Meal, meal_id)
    if meal is None:
        raise NotFoundError("Meal not found")

    review = Review(
        meal_id=meal.id,
        meal_title=body.meal_title or meal.title,
        user=body.user,
        email=body.email,
        comment=body.comment,
        rating=body.rating,
        posted_at=datetime.now(UTC),
    )
    session.add(review)
    meal.reviews_count = Meal.reviews_count + 1
    session.flush()
    _refresh_meal_rating(session, meal)
    session.commit()
    session.refresh(review)
    logger.info("Review added", extra={"meal_id": meal_id, "review_id": review.id})
    return review


def list_reviews_for_meal(session: Session, meal_id: int) -> list[Review]:
    """Reviews of one meal, newest first."""
    return (
        session.query(Review)
        .filter(Review.meal_id == meal_id)
        .order_by(Review.posted_at.desc(), Review.id.desc())
        .all()
    )


def list_reviews(
    session: Session, offset: int, limit: int, email: str | None = None
) -> tuple[list[Review], int]:
    """One page of reviews (optionally only those written by email) and the total."""
    query = session.query(Review)
    if email is not None:
        query = query.filter(Review.email == email)
    total = query.count()
    reviews = query.order_by(Review.id).offset(offset).limit(limit).all()
    return reviews, total


def update_review(session: Session, review_id: int, body: ReviewUpdate) -> Review:
    review = session.get(Review, review_id)
    if review is None:
        raise NotFoundError("Review not found or no change made.")
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes or all(getattr(review, k) == v for k, v in changes.items()):
        raise NotFoundError("Review not found or no change made.")
    for field, value in changes.items():
        setattr(review, field, value)
    if "rating" in changes:
        session.flush()
        _refresh_meal_rating(session, review.meal)
    session.commit()
    return review


def delete_review(session: Session, review_id: int) -> None:
    """Delete a review and decrement its meal's reviews_count."""
    review = session.get(Review, review_id)
    if review is None:
        raise NotFoundError("Review not found")
    meal = review.meal
    session.delete(review)
    if meal is not None:
        meal.reviews_count = Meal.reviews_count - 1
        session.flush()
        _refresh_meal_rating(session, meal)
    session.commit()
    logger.info("Review deleted", extra={"review_id": review_id})
