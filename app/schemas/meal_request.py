"""Pydantic schemas for meal requests."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MealRequestCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    meal_id: int = Field(..., alias="mealId")
    meal_title: str = Field(default="", alias="mealTitle", max_length=255)
    user_email: str = Field(..., alias="userEmail", min_length=3, max_length=320)
    user_name: str = Field(default="", alias="userName", max_length=255)


class MealRequestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    meal_id: int = Field(..., alias="mealId")
    meal_title: str = Field(..., alias="mealTitle")
    user_email: str = Field(..., alias="userEmail")
    user_name: str = Field(..., alias="userName")
    status: str
    requested_at: datetime | None = Field(default=None, alias="requestedAt")


class RequestExistsResponse(BaseModel):
    exists: bool


class UserMealRequestsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    requests: list[MealRequestOut]


class MealRequestsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    data: list[MealRequestOut]
