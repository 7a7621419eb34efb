"""ORM model for registered company users."""

from sqlalchemy import Column, DateTime, Integer, String, func

from offiswap.models.base import Base


class User(Base):
    """
    Registered user (a company account) that can post listings.

    password_hash is a bcrypt hash and never leaves the server boundary.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
