"""Pydantic schemas for listings: creation payload, partial update patch, and responses."""

from datetime import date, datetime
from typing import Any, Literal, get_args

from pydantic import BaseModel, Field, model_validator

# Closed enumerations for condition and lifecycle status.
ListingCondition = Literal["new", "like_new", "good", "fair", "poor"]
ListingStatus = Literal["available", "claimed", "exchanged"]

CONDITION_VALUES: frozenset[str] = frozenset(get_args(ListingCondition))
STATUS_VALUES: frozenset[str] = frozenset(get_args(ListingStatus))

TITLE_MAX_LENGTH = 255
ITEM_TYPE_MAX_LENGTH = 255
LOCATION_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


def _check_window(available_from: date | None, available_until: date | None) -> None:
    if available_from and available_until and available_until < available_from:
        raise ValueError("available_until must be on or after available_from")


class ListingCreate(BaseModel):
    """Fields accepted when posting a new listing. Seller comes from the token, never the body."""

    model_config = {"extra": "ignore"}

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    item_type: str = Field(..., min_length=1, max_length=ITEM_TYPE_MAX_LENGTH)
    location: str = Field(..., min_length=1, max_length=LOCATION_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    quantity: int = Field(default=1, ge=1, description="Number of units; defaults to 1.")
    condition: ListingCondition | None = None
    available_from: date | None = None
    available_until: date | None = None

    @model_validator(mode="before")
    @classmethod
    def default_quantity_when_null(cls, data: Any) -> Any:
        # Clients send "quantity": null for an empty form field.
        if isinstance(data, dict) and data.get("quantity") is None:
            data = {k: v for k, v in data.items() if k != "quantity"}
        return data

    @model_validator(mode="after")
    def validate_window(self) -> "ListingCreate":
        _check_window(self.available_from, self.available_until)
        return self


class ListingPatch(BaseModel):
    """
    Partial update for a listing. Every field is optional; an omitted (or null)
    field keeps its stored value, it is never cleared.

    Only types are enforced here. Value rules (enumerations, lengths, quantity,
    availability window) are checked by the listing service after the lookup
    and ownership check, so a caller who does not own the listing always gets
    NotFound or Forbidden first.
    """

    model_config = {"extra": "ignore"}

    title: str | None = None
    description: str | None = None
    item_type: str | None = None
    quantity: int | None = None
    condition: str | None = None
    location: str | None = None
    available_from: date | None = None
    available_until: date | None = None
    status: str | None = None

    def changes(self) -> dict[str, Any]:
        """Column values to write: only fields that were provided with a value."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class ListingResponse(BaseModel):
    """Listing as returned by the API; seller_name is joined in at read time."""

    id: int
    seller_id: int
    title: str
    description: str | None = None
    item_type: str
    quantity: int
    condition: str | None = None
    location: str
    available_from: date | None = None
    available_until: date | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    seller_name: str | None = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""

    message: str
