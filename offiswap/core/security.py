"""Password hashing and issuing/verifying signed identity tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from offiswap.core.config import settings
from offiswap.core.errors import InvalidToken
from offiswap.schemas.auth import TokenClaim

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72

# Claim key inside the JWT payload holding {id, email, name}.
CLAIM_KEY = "user"


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def issue_token(
    claim: TokenClaim,
    secret: str,
    ttl: timedelta,
    *,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    """Sign a token carrying the claim and an expiry of now + ttl."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(claim.id),
        CLAIM_KEY: claim.model_dump(),
        "iat": issued_at,
        "exp": issued_at + ttl,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    secret: str,
    *,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> TokenClaim:
    """
    Return the embedded claim if the signature is valid and now is before exp.

    Malformed tokens, bad signatures, expiry and bad claim shape all raise the same
    InvalidToken so callers cannot tell why a token was rejected.
    """
    try:
        # Only exp is enforced, below, against the injectable clock.
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp"], "verify_exp": False, "verify_iat": False},
        )
    except jwt.PyJWTError as e:
        raise InvalidToken() from e

    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or isinstance(exp, bool):
        raise InvalidToken()
    current = now or datetime.now(UTC)
    if current.timestamp() >= exp:
        raise InvalidToken()

    try:
        return TokenClaim.model_validate(payload.get(CLAIM_KEY))
    except ValidationError as e:
        raise InvalidToken() from e


def create_access_token(claim: TokenClaim) -> str:
    """Issue a token for the claim using the configured secret, algorithm and expiry."""
    return issue_token(
        claim,
        settings.JWT_SECRET.get_secret_value(),
        timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenClaim:
    """Verify a token with the configured secret. Raises InvalidToken."""
    return verify_token(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )
