"""Combined search across the catalog and upcoming meals."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.meal import MealOut
from app.schemas.search import SearchResults
from app.schemas.upcoming_meal import UpcomingMealOut
from app.services.meals import search_catalog

router = APIRouter()


@router.get("/search", response_model=SearchResults)
def get_search(
    db: Annotated[Session, Depends(get_db)],
    query: str = "",
) -> SearchResults:
    """Up to 10 catalog meals and 10 upcoming meals matching query. Open endpoint."""
    meals, upcoming = search_catalog(db, query)
    return SearchResults(
        meals=[MealOut.model_validate(m) for m in meals],
        upcoming_meals=[UpcomingMealOut.model_validate(u) for u in upcoming],
    )
