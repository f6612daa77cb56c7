"""Request/response schemas for user endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Registration payload sent by the client on first sign-in."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., min_length=3, max_length=320)
    name: str = Field(default="", max_length=255)
    photo: str | None = Field(default=None, max_length=2048)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    photo: str | None = None
    role: str
    badge: str | None = None
    created_at: datetime | None = None


class RegisterResponse(BaseModel):
    """inserted is False when the email was already registered (no-op)."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    inserted: bool
    inserted_id: int | None = Field(default=None, alias="insertedId")


class RoleResponse(BaseModel):
    role: str


class RoleUpdateRequest(BaseModel):
    # Optional so a missing role is reported as 400 rather than 422
    role: str | None = None


class RoleUpdateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    updated_id: int = Field(..., alias="updatedId")


class ManageUsersResponse(BaseModel):
    users: list[UserOut]
    total: int
