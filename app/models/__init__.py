"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.meal import Meal
from app.models.meal_request import MealRequest
from app.models.payment import Payment
from app.models.review import Review
from app.models.upcoming_meal import UpcomingMeal, UpcomingMealLike
from app.models.user import User

__all__ = [
    "Base",
    "Meal",
    "MealRequest",
    "Payment",
    "Review",
    "UpcomingMeal",
    "UpcomingMealLike",
    "User",
]
