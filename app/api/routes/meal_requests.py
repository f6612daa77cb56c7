"""Meal request endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.routes.auth import get_token_claims, require_admin, require_user
from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser, TokenClaims
from app.schemas.meal import MessageResponse
from app.schemas.meal_request import (
    MealRequestCreate,
    MealRequestOut,
    MealRequestsPage,
    RequestExistsResponse,
    UserMealRequestsPage,
)
from app.services.meal_requests import (
    create_request,
    delete_request,
    list_requests,
    request_exists,
    serve_request,
)
from app.services.pagination import page_offset, total_pages

router = APIRouter()

PageParam = Annotated[int, Query(ge=1)]
LimitParam = Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)]


@router.get("", response_model=RequestExistsResponse)
def get_request_exists(
    meal_id: Annotated[int, Query(alias="mealId")],
    user_email: Annotated[str, Query(alias="userEmail")],
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> RequestExistsResponse:
    return RequestExistsResponse(exists=request_exists(db, meal_id, user_email))


@router.get("/user", response_model=UserMealRequestsPage)
def get_user_requests(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_user)],
    email: str | None = None,
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
) -> UserMealRequestsPage:
    if not email:
        raise HTTPException(status_code=400, detail="Email query is required.")
    requests, total = list_requests(db, page_offset(page, limit), limit, user_email=email)
    return UserMealRequestsPage(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
        requests=[MealRequestOut.model_validate(r) for r in requests],
    )


@router.get("/all", response_model=MealRequestsPage)
def get_all_requests(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
) -> MealRequestsPage:
    requests, total = list_requests(db, page_offset(page, limit), limit)
    return MealRequestsPage(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
        data=[MealRequestOut.model_validate(r) for r in requests],
    )


@router.get("/search", response_model=MealRequestsPage)
def get_search_requests(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    keyword: str = "",
    page: PageParam = 1,
    limit: LimitParam = settings.DEFAULT_PAGE_SIZE,
) -> MealRequestsPage:
    """Requests whose requester email contains keyword (case-insensitive)."""
    requests, total = list_requests(
        db, page_offset(page, limit), limit, keyword=keyword.strip()
    )
    return MealRequestsPage(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
        data=[MealRequestOut.model_validate(r) for r in requests],
    )


@router.post("", response_model=MealRequestOut, status_code=201)
def post_request(
    body: MealRequestCreate,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> MealRequestOut:
    """Request a meal; a second request for the same meal by the same user is rejected with 400."""
    return MealRequestOut.model_validate(create_request(db, body))


@router.patch("/serve/{request_id}", response_model=MealRequestOut)
def patch_serve_request(
    request_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MealRequestOut:
    return MealRequestOut.model_validate(serve_request(db, request_id))


@router.delete("/{request_id}", response_model=MessageResponse)
def delete_request_by_id(
    request_id: int,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> MessageResponse:
    delete_request(db, request_id)
    return MessageResponse(message="Meal request deleted")
