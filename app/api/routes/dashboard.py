"""Dashboard overview endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.routes.auth import get_token_claims, require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser, TokenClaims
from app.schemas.dashboard import AdminDashboardOverview, UserDashboardOverview
from app.services.dashboard import admin_overview, user_overview

router = APIRouter()


@router.get("/user-dashboard-overview", response_model=UserDashboardOverview)
def get_user_dashboard(
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
    email: str | None = None,
) -> UserDashboardOverview:
    if not email:
        raise HTTPException(status_code=400, detail="Email query parameter is required")
    return user_overview(db, email)


@router.get("/admin-dashboard-overview", response_model=AdminDashboardOverview)
def get_admin_dashboard(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AdminDashboardOverview:
    return admin_overview(db)
