"""Pydantic request/response schemas."""

from offiswap.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenClaim,
    TokenResponse,
    UserPublic,
)
from offiswap.schemas.health import HealthResponse
from offiswap.schemas.listing import (
    CONDITION_VALUES,
    STATUS_VALUES,
    ListingCondition,
    ListingCreate,
    ListingPatch,
    ListingResponse,
    ListingStatus,
    MessageResponse,
)

__all__ = [
    "CONDITION_VALUES",
    "HealthResponse",
    "ListingCondition",
    "ListingCreate",
    "ListingPatch",
    "ListingResponse",
    "ListingStatus",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "STATUS_VALUES",
    "TokenClaim",
    "TokenResponse",
    "UserPublic",
]
