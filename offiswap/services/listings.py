"""Listing service: create/read listings and ownership-checked update/delete."""

import logging
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from offiswap.core.errors import Forbidden, InvalidInput, NotFound
from offiswap.models import Listing, User
from offiswap.schemas.auth import TokenClaim
from offiswap.schemas.listing import (
    CONDITION_VALUES,
    DESCRIPTION_MAX_LENGTH,
    ITEM_TYPE_MAX_LENGTH,
    LOCATION_MAX_LENGTH,
    STATUS_VALUES,
    TITLE_MAX_LENGTH,
    ListingCreate,
    ListingPatch,
    ListingResponse,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Listing not found."


def _with_seller_name(db: Session) -> Query:
    """Listings joined with their seller's display name (read-time join, not stored)."""
    return db.query(Listing, User.name).join(User, Listing.seller_id == User.id)


def _newest_first(query: Query) -> Query:
    return query.order_by(Listing.created_at.desc(), Listing.id.desc())


def _to_response(listing: Listing, seller_name: str | None) -> ListingResponse:
    response = ListingResponse.model_validate(listing)
    response.seller_name = seller_name
    return response


def create_listing(db: Session, owner: TokenClaim, data: ListingCreate) -> ListingResponse:
    """Persist a new listing owned by the acting user. Status always starts as 'available'."""
    listing = Listing(
        seller_id=owner.id,
        title=data.title,
        description=data.description,
        item_type=data.item_type,
        quantity=data.quantity,
        condition=data.condition,
        location=data.location,
        available_from=data.available_from,
        available_until=data.available_until,
        status="available",
    )
    db.add(listing)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise InvalidInput("Listing could not be created with the given data.") from e
    db.refresh(listing)
    logger.info("Listing created: id=%s seller_id=%s", listing.id, owner.id)
    return get_listing(db, listing.id)


def list_available(db: Session) -> list[ListingResponse]:
    """All listings with status 'available', newest first, with seller_name."""
    rows = _newest_first(
        _with_seller_name(db).filter(Listing.status == "available")
    ).all()
    return [_to_response(listing, seller_name) for listing, seller_name in rows]


def count_available(db: Session) -> int:
    return db.query(Listing).filter(Listing.status == "available").count()


def list_for_owner(db: Session, owner_id: int) -> list[ListingResponse]:
    """Every listing owned by owner_id regardless of status, newest first."""
    rows = _newest_first(
        _with_seller_name(db).filter(Listing.seller_id == owner_id)
    ).all()
    return [_to_response(listing, seller_name) for listing, seller_name in rows]


def get_listing(db: Session, listing_id: int) -> ListingResponse:
    """One listing in any status; listings are publicly readable. Raises NotFound."""
    row = _with_seller_name(db).filter(Listing.id == listing_id).first()
    if row is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    listing, seller_name = row
    return _to_response(listing, seller_name)


def _get_owned(db: Session, listing_id: int, acting: TokenClaim, action: str) -> Listing:
    """Look up the listing and require the acting user to be its seller (404, then 403)."""
    listing = db.query(Listing).filter(Listing.id == listing_id).first()
    if listing is None:
        raise NotFound(NOT_FOUND_MESSAGE)
    if listing.seller_id != acting.id:
        logger.warning(
            "Denied %s of listing id=%s: user id=%s is not the seller",
            action,
            listing_id,
            acting.id,
        )
        raise Forbidden(f"User not authorized to {action} this listing.")
    return listing


_TEXT_LIMITS = {
    "title": TITLE_MAX_LENGTH,
    "item_type": ITEM_TYPE_MAX_LENGTH,
    "location": LOCATION_MAX_LENGTH,
}


def _validate_changes(listing: Listing, changes: dict[str, Any]) -> None:
    for field, max_length in _TEXT_LIMITS.items():
        value = changes.get(field)
        if value == "":
            raise InvalidInput(f"{field} must not be empty.")
        if value is not None and len(value) > max_length:
            raise InvalidInput(f"{field} must be at most {max_length} characters.")
    description = changes.get("description")
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvalidInput(f"description must be at most {DESCRIPTION_MAX_LENGTH} characters.")
    quantity = changes.get("quantity")
    if quantity is not None and quantity < 1:
        raise InvalidInput("quantity must be at least 1.")

    condition = changes.get("condition")
    if condition is not None and condition not in CONDITION_VALUES:
        raise InvalidInput("Invalid condition value.")
    status = changes.get("status")
    if status is not None and status not in STATUS_VALUES:
        raise InvalidInput("Invalid status value.")

    available_from = changes.get("available_from", listing.available_from)
    available_until = changes.get("available_until", listing.available_until)
    if available_from and available_until and available_until < available_from:
        raise InvalidInput("available_until must be on or after available_from.")


def update_listing(
    db: Session,
    listing_id: int,
    acting: TokenClaim,
    patch: ListingPatch,
) -> ListingResponse:
    """
    Apply a partial update to a listing owned by the acting user.

    Fields missing from the patch keep their stored values. The write is a single
    UPDATE conditioned on both id and seller_id, so a concurrent ownership change
    between the check and the write cannot produce an unauthorized update.
    """
    listing = _get_owned(db, listing_id, acting, "update")
    changes = patch.changes()
    _validate_changes(listing, changes)

    values: dict[str, Any] = {**changes, "updated_at": func.now()}
    try:
        updated = (
            db.query(Listing)
            .filter(Listing.id == listing_id, Listing.seller_id == acting.id)
            .update(values, synchronize_session=False)
        )
        if updated == 0:
            db.rollback()
            raise NotFound("Listing not found or update failed.")
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise InvalidInput("Invalid data format for update.") from e

    logger.info("Listing updated: id=%s fields=%s", listing_id, sorted(changes))
    return get_listing(db, listing_id)


def delete_listing(db: Session, listing_id: int, acting: TokenClaim) -> str:
    """Delete a listing owned by the acting user; returns a confirmation message."""
    _get_owned(db, listing_id, acting, "delete")
    deleted = (
        db.query(Listing)
        .filter(Listing.id == listing_id, Listing.seller_id == acting.id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise NotFound("Listing not found or delete failed.")
    db.commit()
    logger.info("Listing deleted: id=%s", listing_id)
    return f"Listing {listing_id} deleted successfully."
