"""Aggregate counts for the user and admin dashboards."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Meal, MealRequest, Payment, Review, UpcomingMeal, User
from app.models.meal_request import REQUEST_STATUS_PENDING
from app.schemas.dashboard import AdminDashboardOverview, CategoryCount, UserDashboardOverview


def _total_paid(session: Session, email: str | None = None) -> float:
    query = session.query(func.coalesce(func.sum(Payment.amount), 0))
    if email is not None:
        query = query.filter(Payment.email == email)
    return float(query.scalar() or 0)


def user_overview(session: Session, email: str) -> UserDashboardOverview:
    """Counts for one user; categories are those of the meals the user requested."""
    rows = (
        session.query(Meal.category, func.count(MealRequest.id))
        .select_from(MealRequest)
        .join(Meal, Meal.id == MealRequest.meal_id)
        .filter(MealRequest.user_email == email)
        .group_by(Meal.category)
        .order_by(Meal.category)
        .all()
    )
    return UserDashboardOverview(
        total_meals=session.query(Meal).filter(Meal.distributor_email == email).count(),
        meal_requests=session.query(MealRequest).filter(MealRequest.user_email == email).count(),
        pending_requests=session.query(MealRequest)
        .filter(
            MealRequest.user_email == email,
            MealRequest.status == REQUEST_STATUS_PENDING,
        )
        .count(),
        review_count=session.query(Review).filter(Review.email == email).count(),
        total_paid=_total_paid(session, email),
        category_distribution=[CategoryCount(category=c, count=n) for c, n in rows],
    )


def admin_overview(session: Session) -> AdminDashboardOverview:
    rows = (
        session.query(Meal.category, func.count(Meal.id))
        .group_by(Meal.category)
        .order_by(Meal.category)
        .all()
    )
    return AdminDashboardOverview(
        total_meals=session.query(Meal).count(),
        upcoming_meals=session.query(UpcomingMeal).count(),
        pending_requests=session.query(MealRequest)
        .filter(MealRequest.status == REQUEST_STATUS_PENDING)
        .count(),
        total_users=session.query(User).count(),
        total_reviews=session.query(Review).count(),
        total_revenue=_total_paid(session),
        category_distribution=[CategoryCount(category=c, count=n) for c, n in rows],
    )
