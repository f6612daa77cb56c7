"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, SessionRequest, SessionResponse, TokenClaims
from app.schemas.dashboard import AdminDashboardOverview, CategoryCount, UserDashboardOverview
from app.schemas.health import HealthResponse
from app.schemas.meal import MealCreate, MealOut, MealUpdate
from app.schemas.meal_request import MealRequestCreate, MealRequestOut
from app.schemas.payment import PaymentCreate, PaymentIntentRequest, PaymentOut
from app.schemas.review import ReviewCreate, ReviewOut, ReviewUpdate
from app.schemas.search import SearchResults
from app.schemas.upcoming_meal import (
    LikeRequest,
    LikeResponse,
    UpcomingMealOut,
    UpcomingMealSubmit,
    VoteResult,
)
from app.schemas.user import UserCreate, UserOut

__all__ = [
    "AdminDashboardOverview",
    "CategoryCount",
    "CurrentUser",
    "HealthResponse",
    "LikeRequest",
    "LikeResponse",
    "MealCreate",
    "MealOut",
    "MealRequestCreate",
    "MealRequestOut",
    "MealUpdate",
    "PaymentCreate",
    "PaymentIntentRequest",
    "PaymentOut",
    "ReviewCreate",
    "ReviewOut",
    "ReviewUpdate",
    "SessionRequest",
    "SearchResults",
    "SessionResponse",
    "TokenClaims",
    "UpcomingMealOut",
    "UpcomingMealSubmit",
    "UserCreate",
    "UserOut",
    "VoteResult",
]
