"""Response schema for the combined meal search."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.meal import MealOut
from app.schemas.upcoming_meal import UpcomingMealOut


class SearchResults(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    meals: list[MealOut]
    upcoming_meals: list[UpcomingMealOut] = Field(..., alias="upcomingMeals")
