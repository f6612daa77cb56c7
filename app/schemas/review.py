"""Pydantic schemas for meal reviews."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """
    Payload for POST /meals/{id}/reviews.

    user, email, comment and rating are required; they are optional here so the
    service can answer 400 "Missing review fields" instead of a 422.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    meal_title: str | None = Field(default=None, alias="mealTitle")
    user: str | None = None
    email: str | None = None
    comment: str | None = None
    rating: int | None = Field(default=None, ge=0, le=5)


class ReviewUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    comment: str | None = None
    rating: int | None = Field(default=None, ge=0, le=5)


class ReviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    meal_id: int = Field(..., alias="mealId")
    meal_title: str = Field(..., alias="mealTitle")
    user: str
    email: str
    comment: str
    rating: int
    posted_at: datetime | None = None


class ReviewsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reviews: list[ReviewOut]
    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
