"""User endpoints: registration, lookup, admin search and role management."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.routes.auth import get_token_claims, require_admin
from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser, TokenClaims
from app.schemas.user import (
    ManageUsersResponse,
    RegisterResponse,
    RoleResponse,
    RoleUpdateRequest,
    RoleUpdateResponse,
    UserCreate,
    UserOut,
)
from app.services.pagination import page_offset
from app.services.users import (
    get_role,
    get_user_by_email,
    list_users,
    register_user,
    search_users,
    update_role,
)

router = APIRouter()


@router.post("", response_model=RegisterResponse)
def post_user(
    body: UserCreate,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Register the user on first sign-in; an already-registered email is a no-op success."""
    user, inserted = register_user(db, body.email, name=body.name, photo=body.photo)
    if not inserted:
        return RegisterResponse(message="User already exist", inserted=False)
    return RegisterResponse(message="User created", inserted=True, inserted_id=user.id)


@router.get("", response_model=UserOut | None)
def get_user(
    email: str,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> UserOut | None:
    user = get_user_by_email(db, email)
    return UserOut.model_validate(user) if user is not None else None


@router.get("/role", response_model=RoleResponse)
def get_user_role(
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims, Depends(get_token_claims)],
    email: str | None = None,
) -> RoleResponse:
    if not email:
        raise HTTPException(status_code=400, detail="Email query parameter is required")
    return RoleResponse(role=get_role(db, email))


@router.get("/search", response_model=list[UserOut])
def get_users_search(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    keyword: str = "",
) -> list[UserOut]:
    return [UserOut.model_validate(u) for u in search_users(db, keyword)]


@router.get("/manageUsers", response_model=ManageUsersResponse)
def get_manage_users(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    keyword: str = "",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> ManageUsersResponse:
    """Paginated user list for the admin panel, filtered by name or email."""
    users, total = list_users(db, keyword, page_offset(page, limit), limit)
    return ManageUsersResponse(users=[UserOut.model_validate(u) for u in users], total=total)


@router.patch("/update-role/{user_id}", response_model=RoleUpdateResponse)
def patch_user_role(
    user_id: int,
    body: RoleUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> RoleUpdateResponse:
    """Change a user's role (admin only). Takes effect on the user's next request."""
    update_role(db, user_id, body.role)
    return RoleUpdateResponse(message="User role updated successfully", updated_id=user_id)
