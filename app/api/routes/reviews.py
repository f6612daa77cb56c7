"""Review endpoints; creating or deleting a review updates the meal's review count."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.routes.auth import get_token_claims, require_admin, require_user
from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser, TokenClaims
from app.schemas.meal import MessageResponse
from app.schemas.review import ReviewCreate, ReviewOut, ReviewsPage, ReviewUpdate
from app.services.pagination import page_offset, total_pages
from app.services.reviews import (
    create_review,
    delete_review,
    list_reviews,
    list_reviews_for_meal,
    update_review,
)

router = APIRouter()

PageParam = Annotated[int, Query(ge=1)]
LimitParam = Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)]


def _page(reviews: list, total: int, page: int, limit: int) -> ReviewsPage:
    return ReviewsPage(
        reviews=[ReviewOut.model_validate(r) for r in reviews],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
    )


@router.get("/reviews", response_model=ReviewsPage)
def get_reviews(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
) -> ReviewsPage:
    reviews, total = list_reviews(db, page_offset(page, limit), limit)
    return _page(reviews, total, page, limit)


@router.get("/reviews/user", response_model=ReviewsPage)
def get_user_reviews(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_user)],
    email: str | None = None,
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
) -> ReviewsPage:
    if not email:
        raise HTTPException(status_code=400, detail="Email query is required.")
    reviews, total = list_reviews(db, page_offset(page, limit), limit, email=email)
    return _page(reviews, total, page, limit)


@router.get("/meals/{meal_id}/reviews", response_model=list[ReviewOut])
def get_meal_reviews(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> list[ReviewOut]:
    """Reviews of one meal, newest first. Open endpoint."""
    return [ReviewOut.model_validate(r) for r in list_reviews_for_meal(db, meal_id)]


@router.post("/meals/{meal_id}/reviews", response_model=ReviewOut, status_code=201)
def post_meal_review(
    meal_id: int,
    body: ReviewCreate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> ReviewOut:
    return ReviewOut.model_validate(create_review(db, meal_id, body))


@router.patch("/reviews/{review_id}", response_model=MessageResponse)
def patch_review(
    review_id: int,
    body: ReviewUpdate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> MessageResponse:
    update_review(db, review_id, body)
    return MessageResponse(message="Review updated successfully.")


@router.delete("/reviews/{review_id}", response_model=MessageResponse)
def delete_review_by_id(
    review_id: int,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> MessageResponse:
    delete_review(db, review_id)
    return MessageResponse(message="Review deleted and meal review count updated")
