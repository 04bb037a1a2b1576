"""SQLAlchemy models."""

from riderwatch.models.fuel_settings import FuelSettingsRecord
from riderwatch.models.trip import Trip
from riderwatch.models.user import User

__all__ = [
    "User",
    "Trip",
    "FuelSettingsRecord",
]
