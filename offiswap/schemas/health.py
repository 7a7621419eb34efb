"""Schema for the marketplace status endpoint."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status plus a snapshot of the public feed."""

    status: Literal["ok", "degraded"]
    version: str
    environment: str
    database: Literal["connected", "disconnected"]
    available_listings: int | None = Field(
        default=None,
        description="Listings currently in the public feed; null when the database is down",
    )
