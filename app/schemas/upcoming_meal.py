"""Pydantic schemas for upcoming (candidate) meals and the like workflow."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.meal import Ingredients, coerce_prep_time_value


class UpcomingMealSubmit(BaseModel):
    """
    Payload for POST /upcoming-meals.

    Every field is optional at the schema level: presence of the required ones
    is checked by the promotion service so a missing field yields 400, not 422.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    category: str | None = None
    cuisine: str | None = None
    image: str | None = None
    ingredients: Ingredients | None = None
    description: str | None = None
    price: float | None = None
    prep_time: str | None = None
    distributor_name: str | None = None
    distributor_email: str | None = None

    @field_validator("prep_time", mode="before")
    @classmethod
    def coerce_prep_time(cls, v: object) -> object:
        return coerce_prep_time_value(v)


class UpcomingMealOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    category: str
    cuisine: str
    image: str
    ingredients: Ingredients
    description: str
    price: float
    prep_time: str
    distributor_name: str
    distributor_email: str
    status: str
    likes: int
    liked_by: list[str] = Field(default_factory=list)
    rating: float
    reviews_count: int
    posted_at: datetime | None = None


class UpcomingMealsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    data: list[UpcomingMealOut]


class LikeRequest(BaseModel):
    # Optional so a missing email is reported as 400 rather than 422
    email: str | None = None


class VoteResult(BaseModel):
    """Outcome of one like: either published, or the new like count."""

    published: bool
    updated_likes: int | None = None


class LikeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    published: bool
    updated_likes: int | None = Field(default=None, alias="updatedLikes")
