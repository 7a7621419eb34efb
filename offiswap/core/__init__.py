"""Core app configuration, database, security and errors."""

from offiswap.core.config import get_settings, settings
from offiswap.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
