"""Register/login routes and the auth gate dependency (get_current_user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from offiswap.core.database import get_db
from offiswap.core.errors import InvalidToken, Unauthenticated
from offiswap.core.security import decode_access_token
from offiswap.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenClaim,
    TokenResponse,
    UserPublic,
)
from offiswap.services.credentials import login_user, register_user

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"

router = APIRouter()
token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    """Create a company account. Returns the public profile (never the password hash)."""
    user = register_user(db, body)
    return UserPublic.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a signed token valid for one hour.
    Send it back on protected routes in the x-auth-token header.
    """
    return TokenResponse(token=login_user(db, body.email, body.password))


def get_current_user(
    token: Annotated[str | None, Depends(token_header)],
) -> TokenClaim:
    """
    Dependency: verify the x-auth-token header and return the acting identity.

    Stateless; evaluated on every request with no session cache or DB lookup.
    Raises Unauthenticated when the header is absent and InvalidToken otherwise.
    """
    if not token:
        raise Unauthenticated()
    try:
        return decode_access_token(token)
    except InvalidToken:
        logger.debug("Rejected request with invalid token")
        raise


CurrentUser = Annotated[TokenClaim, Depends(get_current_user)]
