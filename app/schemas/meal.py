"""Pydantic schemas for catalog meals."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

Ingredients = list[str] | str


def coerce_prep_time_value(value: object) -> object:
    """Clients send prep time as either '20 min' or a bare number of minutes."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class MealCreate(BaseModel):
    """Payload for POST /meals (direct publication by a distributor)."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=64)
    cuisine: str = Field(default="", max_length=64)
    image: str = Field(default="", max_length=2048)
    ingredients: Ingredients = Field(default_factory=list)
    description: str = ""
    price: float = Field(default=0.0, ge=0)
    prep_time: str = Field(default="", max_length=64)
    distributor_name: str = Field(default="", max_length=255)
    distributor_email: str = Field(default="", max_length=320)

    @field_validator("prep_time", mode="before")
    @classmethod
    def coerce_prep_time(cls, v: object) -> object:
        return coerce_prep_time_value(v)


class MealUpdate(BaseModel):
    """Partial update for PATCH /meals/update/{id}; only fields that are set are written."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=64)
    cuisine: str | None = Field(default=None, max_length=64)
    image: str | None = Field(default=None, max_length=2048)
    ingredients: Ingredients | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    prep_time: str | None = Field(default=None, max_length=64)
    distributor_name: str | None = Field(default=None, max_length=255)
    distributor_email: str | None = Field(default=None, max_length=320)

    @field_validator("prep_time", mode="before")
    @classmethod
    def coerce_prep_time(cls, v: object) -> object:
        return coerce_prep_time_value(v)


class MealOut(BaseModel):
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
    likes: int
    rating: float
    reviews_count: int
    posted_at: datetime | None = None


class MealsPage(BaseModel):
    """Filtered catalog page for infinite scrolling."""

    model_config = ConfigDict(populate_by_name=True)

    meals: list[MealOut]
    has_more: bool = Field(..., alias="hasMore")


class SortedMealsPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(..., alias="totalCount")
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    data: list[MealOut]


class InsertedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    inserted_id: int = Field(..., alias="insertedId")


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class MealLikeResponse(BaseModel):
    message: str
    likes: int
