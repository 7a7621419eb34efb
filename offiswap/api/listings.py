"""Listing routes: public browsing plus owner-only create/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from offiswap.api.auth import CurrentUser
from offiswap.core.database import get_db
from offiswap.schemas.listing import (
    ListingCreate,
    ListingPatch,
    ListingResponse,
    MessageResponse,
)
from offiswap.services import listings as listing_service

router = APIRouter()

DbSession = Annotated[Session, Depends(get_db)]


@router.post("", response_model=ListingResponse, status_code=status.HTTP_201_CREATED)
def create_listing(
    body: ListingCreate,
    db: DbSession,
    user: CurrentUser,
) -> ListingResponse:
    """Post a new listing as the authenticated user; quantity defaults to 1."""
    return listing_service.create_listing(db, user, body)


@router.get("", response_model=list[ListingResponse])
def list_listings(db: DbSession) -> list[ListingResponse]:
    """Public: all available listings, newest first, with seller_name."""
    return listing_service.list_available(db)


# Declared before /{listing_id} so "my" is not parsed as an id.
@router.get("/my", response_model=list[ListingResponse])
def my_listings(db: DbSession, user: CurrentUser) -> list[ListingResponse]:
    """The caller's own listings in every status."""
    return listing_service.list_for_owner(db, user.id)


@router.get("/{listing_id}", response_model=ListingResponse)
def get_listing(listing_id: int, db: DbSession) -> ListingResponse:
    """Public: a single listing in any status."""
    return listing_service.get_listing(db, listing_id)


@router.put("/{listing_id}", response_model=ListingResponse)
def update_listing(
    listing_id: int,
    body: ListingPatch,
    db: DbSession,
    user: CurrentUser,
) -> ListingResponse:
    """Partial update (omitted fields are kept). Only the seller may update."""
    return listing_service.update_listing(db, listing_id, user, body)


@router.delete("/{listing_id}", response_model=MessageResponse)
def delete_listing(listing_id: int, db: DbSession, user: CurrentUser) -> MessageResponse:
    """Delete a listing. Only the seller may delete."""
    return MessageResponse(message=listing_service.delete_listing(db, listing_id, user))
