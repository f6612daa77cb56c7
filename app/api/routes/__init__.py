"""API routes."""

from fastapi import APIRouter

from app.api.routes import (
    auth,
    dashboard,
    health,
    meal_requests,
    meals,
    payments,
    reviews,
    search,
    upcoming_meals,
    users,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(meals.router, prefix="/meals", tags=["meals"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(upcoming_meals.router, prefix="/upcoming-meals", tags=["upcoming-meals"])
router.include_router(meal_requests.router, prefix="/meal-requests", tags=["meal-requests"])
router.include_router(payments.router, tags=["payments"])
router.include_router(dashboard.router, prefix="/api", tags=["dashboard"])
router.include_router(search.router, prefix="/api", tags=["search"])
