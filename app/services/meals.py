"""Published meal catalog: filtered listing, CRUD and likes."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models import Meal, UpcomingMeal

logger = logging.getLogger(__name__)


def parse_price_range(price_range: str) -> tuple[float, float]:
    """Parse 'min-max' into floats. Raises ValidationError on malformed input."""
    parts = price_range.split("-")
    if len(parts) != 2:
        raise ValidationError("priceRange must look like 'min-max'.")
    try:
        low, high = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise ValidationError("priceRange must look like 'min-max'.", cause=e) from e
    if low > high:
        raise ValidationError("priceRange minimum must not exceed its maximum.")
    return low, high


def list_meals(
    session: Session,
    page: int,
    limit: int,
    search: str = "",
    category: str = "",
    price_range: str = "",
) -> tuple[list[Meal], bool]:
    """
    One page of the catalog for infinite scroll. page is zero-based here.

    search matches the title case-insensitively; category is an exact match;
    price_range is inclusive on both ends. Returns (meals, has_more).
    """
    query = session.query(Meal)
    if search:
        query = query.filter(Meal.title.ilike(f"%{search}%"))
    if category:
        query = query.filter(Meal.category == category)
    if price_range:
        low, high = parse_price_range(price_range)
        query = query.filter(Meal.price >= low, Meal.price <= high)
    total = query.count()
    meals = query.order_by(Meal.id).offset(page * limit).limit(limit).all()
    return meals, (page + 1) * limit < total


def list_all_meals(session: Session) -> list[Meal]:
    return session.query(Meal).order_by(Meal.id).all()


def list_meals_by_popularity(
    session: Session, offset: int, limit: int
) -> tuple[list[Meal], int]:
    total = session.query(Meal).count()
    meals = (
        session.query(Meal)
        .order_by(Meal.likes.desc(), Meal.reviews_count.desc(), Meal.id)
        .offset(offset)
        .limit(limit)
        .all()
    )
    return meals, total


def get_meal(session: Session, meal_id: int) -> Meal:
    meal = session.get(Meal, meal_id)
    if meal is None:
        raise NotFoundError("Meal not found")
    return meal


def list_meals_by_distributor(session: Session, email: str) -> list[Meal]:
    return session.query(Meal).filter(Meal.distributor_email == email).order_by(Meal.id).all()


def create_meal(session: Session, fields: dict[str, Any]) -> Meal:
    meal = Meal(
        **fields,
        likes=0,
        rating=0,
        reviews_count=0,
        posted_at=datetime.now(UTC),
    )
    session.add(meal)
    session.commit()
    session.refresh(meal)
    logger.info("Meal published", extra={"meal_id": meal.id})
    return meal


def update_meal(session: Session, meal_id: int, changes: dict[str, Any]) -> Meal:
    """Apply a partial update. Raises NotFoundError if the meal is missing or nothing changes."""
    meal = session.get(Meal, meal_id)
    if meal is None:
        raise NotFoundError("Meal not found or already updated")
    changed = False
    for field, value in changes.items():
        if getattr(meal, field) != value:
            setattr(meal, field, value)
            changed = True
    if not changed:
        raise NotFoundError("Meal not found or already updated")
    session.commit()
    return meal


def delete_meal(session: Session, meal_id: int) -> int:
    """Delete a meal with its reviews and requests. Returns rows deleted (0 or 1)."""
    meal = session.get(Meal, meal_id)
    if meal is None:
        return 0
    session.delete(meal)
    session.commit()
    logger.info("Meal deleted", extra={"meal_id": meal_id})
    return 1


def like_meal(session: Session, meal_id: int) -> int:
    """Increment a catalog meal's like counter and return the new count."""
    updated = (
        session.query(Meal)
        .filter(Meal.id == meal_id)
        .update({Meal.likes: Meal.likes + 1}, synchronize_session=False)
    )
    if updated == 0:
        session.rollback()
        raise NotFoundError("Meal not found")
    session.commit()
    return session.query(Meal.likes).filter(Meal.id == meal_id).scalar()


def search_catalog(
    session: Session, query: str, limit: int = 10
) -> tuple[list[Meal], list[UpcomingMeal]]:
    """
    Case-insensitive search over catalog and upcoming meals.

    Catalog meals match on title, category, cuisine, ingredients or description;
    upcoming meals on title, category or description. At most limit of each.
    Raises ValidationError for a blank query.
    """
    query = (query or "").strip()
    if not query:
        raise ValidationError("Query is required")
    pattern = f"%{query}%"
    meals = (
        session.query(Meal)
        .filter(
            or_(
                Meal.title.ilike(pattern),
                Meal.category.ilike(pattern),
                Meal.cuisine.ilike(pattern),
                cast(Meal.ingredients, String).ilike(pattern),
                Meal.description.ilike(pattern),
            )
        )
        .order_by(Meal.id)
        .limit(limit)
        .all()
    )
    upcoming = (
        session.query(UpcomingMeal)
        .filter(
            or_(
                UpcomingMeal.title.ilike(pattern),
                UpcomingMeal.category.ilike(pattern),
                UpcomingMeal.description.ilike(pattern),
            )
        )
        .order_by(UpcomingMeal.id)
        .limit(limit)
        .all()
    )
    return meals, upcoming
