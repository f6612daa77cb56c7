"""Upcoming meals: open listing, submission, likes and promotion to the catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.routes.auth import require_admin
from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import ValidationError
from app.schemas.auth import CurrentUser
from app.schemas.meal import InsertedResponse, MessageResponse
from app.schemas.upcoming_meal import (
    LikeRequest,
    LikeResponse,
    UpcomingMealOut,
    UpcomingMealsPage,
    UpcomingMealSubmit,
)
from app.services.pagination import page_offset, total_pages
from app.services.promotion import (
    delete_candidate,
    list_candidates,
    list_candidates_by_likes,
    register_vote,
    submit_candidate,
)

router = APIRouter()


@router.get("", response_model=list[UpcomingMealOut])
def get_upcoming_meals(
    db: Annotated[Session, Depends(get_db)],
) -> list[UpcomingMealOut]:
    """All upcoming meals, newest first. Open endpoint."""
    return [UpcomingMealOut.model_validate(m) for m in list_candidates(db)]


@router.get("/sorted", response_model=UpcomingMealsPage)
def get_upcoming_meals_sorted(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> UpcomingMealsPage:
    items, total = list_candidates_by_likes(db, page_offset(page, limit), limit)
    return UpcomingMealsPage(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
        data=[UpcomingMealOut.model_validate(m) for m in items],
    )


@router.post("", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED)
def post_upcoming_meal(
    body: UpcomingMealSubmit,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> InsertedResponse:
    """
    Submit a meal for crowd voting. Every descriptive field is required
    (400 otherwise); counters start at zero and status is 'upcoming'.
    """
    candidate = submit_candidate(db, body.model_dump())
    return InsertedResponse(inserted_id=candidate.id)


@router.patch(
    "/like/{meal_id}",
    response_model=LikeResponse,
    response_model_exclude_none=True,
)
def patch_upcoming_meal_like(
    meal_id: int,
    body: LikeRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LikeResponse:
    """
    Like an upcoming meal once per email.

    When the like count reaches PUBLISH_LIKE_THRESHOLD the meal is moved into the
    catalog and the response reports published=true.
    """
    if not body.email:
        raise ValidationError("User email is required")
    result = register_vote(
        db,
        meal_id,
        body.email,
        threshold=get_settings().PUBLISH_LIKE_THRESHOLD,
    )
    if result.published:
        return LikeResponse(
            message="Maximum likes reached! The meal is now live in the regular meals.",
            published=True,
        )
    return LikeResponse(
        message="Liked successfully.",
        published=False,
        updated_likes=result.updated_likes,
    )


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_upcoming_meal(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    if delete_candidate(db, meal_id) == 0:
        raise HTTPException(status_code=404, detail="Upcoming meal not found")
    return MessageResponse(message="Upcoming meal deleted")
