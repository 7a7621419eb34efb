"""Marketplace status: version, database reachability and public feed size."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from offiswap import __version__
from offiswap.core.config import settings
from offiswap.core.database import check_db_connected, get_db
from offiswap.schemas.health import HealthResponse
from offiswap.services.listings import count_available

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    if not check_db_connected(db):
        return HealthResponse(
            status="degraded",
            version=__version__,
            environment=settings.APP_ENV,
            database="disconnected",
        )
    return HealthResponse(
        status="ok",
        version=__version__,
        environment=settings.APP_ENV,
        database="connected",
        available_listings=count_available(db),
    )
