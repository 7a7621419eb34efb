"""ORM model for office-item listings."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)

from offiswap.models.base import Base
from offiswap.schemas.listing import CONDITION_VALUES, STATUS_VALUES


def _in_list(column: str, values: frozenset[str]) -> str:
    quoted = ", ".join(f"'{v}'" for v in sorted(values))
    return f"{column} IN ({quoted})"


class Listing(Base):
    """
    Surplus office item offered by a seller.

    seller_id is a non-owning reference; only the seller may mutate or delete the row.
    """

    __tablename__ = "listings"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_listings_quantity_positive"),
        CheckConstraint(
            "condition IS NULL OR " + _in_list("condition", CONDITION_VALUES),
            name="ck_listings_condition",
        ),
        CheckConstraint(_in_list("status", STATUS_VALUES), name="ck_listings_status"),
        CheckConstraint(
            "available_from IS NULL OR available_until IS NULL "
            "OR available_until >= available_from",
            name="ck_listings_availability_window",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    seller_id = Column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    item_type = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=1, server_default="1")
    condition = Column(String(32), nullable=True)
    location = Column(String(255), nullable=False)
    available_from = Column(Date, nullable=True)
    available_until = Column(Date, nullable=True)
    status = Column(
        String(32),
        nullable=False,
        default="available",
        server_default="available",
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
