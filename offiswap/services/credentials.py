"""Credential service: company registration and login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from offiswap.core.errors import Conflict, Unauthorized
from offiswap.core.security import create_access_token, hash_password, verify_password
from offiswap.models import User
from offiswap.schemas.auth import RegisterRequest, TokenClaim

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists."
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."


def register_user(db: Session, body: RegisterRequest) -> User:
    """
    Create a user with a bcrypt hash of the password.

    Raises Conflict if the email is taken; the unique index on users.email also
    catches the case where two registrations race past the lookup.
    """
    existing = db.query(User).filter(User.email == body.email).first()
    if existing is not None:
        raise Conflict(DUPLICATE_EMAIL_MESSAGE)

    user = User(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        location=body.location,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict(DUPLICATE_EMAIL_MESSAGE) from e
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def login_user(db: Session, email: str, password: str) -> str:
    """
    Check credentials and return a signed token for {id, email, name}.

    Unknown email and wrong password raise the same Unauthorized error.
    """
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected")
        raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)
    claim = TokenClaim(id=user.id, email=user.email, name=user.name)
    return create_access_token(claim)
