"""Pydantic schemas for the user and admin dashboard overviews."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryCount(BaseModel):
    category: str
    count: int


class UserDashboardOverview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(..., alias="totalMeals")
    meal_requests: int = Field(..., alias="mealRequests")
    pending_requests: int = Field(..., alias="pendingRequests")
    review_count: int = Field(..., alias="reviewCount")
    total_paid: float = Field(..., alias="totalPaid")
    category_distribution: list[CategoryCount] = Field(..., alias="categoryDistribution")


class AdminDashboardOverview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_meals: int = Field(..., alias="totalMeals")
    upcoming_meals: int = Field(..., alias="upcomingMeals")
    pending_requests: int = Field(..., alias="pendingRequests")
    total_users: int = Field(..., alias="totalUsers")
    total_reviews: int = Field(..., alias="totalReviews")
    total_revenue: float = Field(..., alias="totalRevenue")
    category_distribution: list[CategoryCount] = Field(..., alias="categoryDistribution")
