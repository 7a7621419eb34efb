"""Request/response schemas for auth endpoints and the token claim."""

from datetime import datetime

from pydantic import BaseModel, Field

NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
LOCATION_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 72


class RegisterRequest(BaseModel):
    """Company sign-up payload."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, description="Display name")
    email: str = Field(..., min_length=3, max_length=EMAIL_MAX_LEN, description="Login email")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    location: str | None = Field(default=None, max_length=LOCATION_MAX_LEN)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Login email")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class TokenResponse(BaseModel):
    """Signed token returned after successful login; send it back in x-auth-token."""

    token: str = Field(..., description="JWT carrying {id, email, name}")


class UserPublic(BaseModel):
    """User profile as returned by the API (no password hash)."""

    id: int
    name: str
    email: str
    location: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class TokenClaim(BaseModel):
    """Identity embedded in a token and attached to authenticated requests."""

    id: int
    email: str
    name: str
