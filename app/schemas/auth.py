"""Request/response schemas for session (JWT cookie) endpoints and auth dependencies."""

from pydantic import BaseModel, ConfigDict, Field


class SessionRequest(BaseModel):
    """Claims submitted by the client after it signs the user in."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., min_length=3, max_length=320, description="Signed-in user's email")


class SessionResponse(BaseModel):
    """Response for POST /jwt and POST /logout; the token itself travels in the cookie."""

    success: bool = True


class TokenClaims(BaseModel):
    """Claims decoded from a verified session token."""

    email: str | None = None
    role: str | None = None


class CurrentUser(BaseModel):
    """Authenticated user (id, email, role) as re-read from the user store."""

    id: int
    email: str
    name: str
    role: str

    class Config:
        from_attributes = True
