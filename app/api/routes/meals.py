"""Catalog meal endpoints: browsing, admin management and likes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.routes.auth import require_admin
from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.meal import (
    InsertedResponse,
    MealCreate,
    MealLikeResponse,
    MealOut,
    MealsPage,
    MealUpdate,
    MessageResponse,
    SortedMealsPage,
)
from app.services.meals import (
    create_meal,
    delete_meal,
    get_meal,
    like_meal,
    list_all_meals,
    list_meals,
    list_meals_by_distributor,
    list_meals_by_popularity,
    update_meal,
)
from app.services.pagination import page_offset, total_pages

router = APIRouter()


@router.get("", response_model=MealsPage)
def get_meals(
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
    search: str = "",
    category: str = "",
    price_range: Annotated[str, Query(alias="priceRange")] = "",
) -> MealsPage:
    """
    Browse the catalog for infinite scroll (page is zero-based).

    search matches titles, category is exact, priceRange is 'min-max' inclusive.
    """
    meals, has_more = list_meals(db, page, limit, search, category, price_range)
    return MealsPage(meals=[MealOut.model_validate(m) for m in meals], has_more=has_more)


@router.get("/all", response_model=list[MealOut])
def get_all_meals(db: Annotated[Session, Depends(get_db)]) -> list[MealOut]:
    return [MealOut.model_validate(m) for m in list_all_meals(db)]


@router.get("/sorted", response_model=SortedMealsPage)
def get_sorted_meals(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> SortedMealsPage:
    """Catalog ordered by likes, then review count (admin only)."""
    meals, total = list_meals_by_popularity(db, page_offset(page, limit), limit)
    return SortedMealsPage(
        total_count=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
        data=[MealOut.model_validate(m) for m in meals],
    )


@router.get("/distributor/{email}", response_model=list[MealOut])
def get_distributor_meals(
    email: str,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[MealOut]:
    return [MealOut.model_validate(m) for m in list_meals_by_distributor(db, email)]


@router.get("/{meal_id}", response_model=MealOut)
def get_meal_by_id(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MealOut:
    return MealOut.model_validate(get_meal(db, meal_id))


@router.post("", response_model=InsertedResponse, status_code=201)
def post_meal(
    body: MealCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> InsertedResponse:
    meal = create_meal(db, body.model_dump())
    return InsertedResponse(inserted_id=meal.id)


@router.patch("/update/{meal_id}", response_model=MessageResponse)
def patch_meal(
    meal_id: int,
    body: MealUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    update_meal(db, meal_id, body.model_dump(exclude_unset=True, exclude_none=True))
    return MessageResponse(message="Meal updated successfully")


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_meal_by_id(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    if delete_meal(db, meal_id) == 0:
        raise HTTPException(status_code=404, detail="Meal not found")
    return MessageResponse(message="Meal deleted")


@router.patch("/{meal_id}/like", response_model=MealLikeResponse)
def patch_meal_like(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MealLikeResponse:
    return MealLikeResponse(message="Like updated", likes=like_meal(db, meal_id))
