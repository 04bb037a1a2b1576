"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from riderwatch.database import get_db
from riderwatch.errors import AuthenticationError
from riderwatch.models.user import User
from riderwatch.services.auth import decode_access_token, get_user_by_id
from riderwatch.services.fuel_settings_service import FuelSettingsService
from riderwatch.services.report_service import ReportService
from riderwatch.services.trip_service import TripService

logger = logging.getLogger(__name__)

# Missing credentials are reported by get_current_user_id so every auth failure is a 401
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> int:
    """Get the user id bound to the request's JWT token."""
    if credentials is None:
        raise AuthenticationError("Authentication required. Please login.")

    payload = decode_access_token(credentials.credentials)
    if payload is None or payload.get("sub") is None:
        logger.warning("Rejected invalid or expired token")
        raise AuthenticationError("Invalid or expired token. Please login again.")

    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token. Please login again.") from None


def get_current_user(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    user = get_user_by_id(db, user_id)
    if user is None:
        logger.warning(f"Token subject {user_id} no longer exists")
        raise AuthenticationError("User not found")

    return user


def get_trip_service(
    db: Annotated[Session, Depends(get_db)],
) -> TripService:
    """Get trip service with dependencies."""
    return TripService(db)


def get_report_service(
    db: Annotated[Session, Depends(get_db)],
) -> ReportService:
    """Get report service with dependencies."""
    return ReportService(db)


def get_fuel_settings_service(
    db: Annotated[Session, Depends(get_db)],
) -> FuelSettingsService:
    """Get fuel settings service with dependencies."""
    return FuelSettingsService(db)
