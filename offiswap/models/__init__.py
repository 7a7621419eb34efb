"""SQLAlchemy ORM models."""

from offiswap.models.base import Base
from offiswap.models.listing import Listing
from offiswap.models.user import User

__all__ = ["Base", "Listing", "User"]
