"""Trip API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, status

from riderwatch.api.dependencies import get_current_user, get_trip_service
from riderwatch.models.user import User
from riderwatch.schemas.trip import MessageResponse, TripPayload, TripResponse
from riderwatch.services.trip_service import TripService

router = APIRouter(prefix="/api/trips", tags=["trips"])


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripPayload,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TripService, Depends(get_trip_service)],
):
    """Record a trip; net profit is computed server side."""
    return service.create_trip(current_user.id, trip_data)


@router.get("", response_model=list[TripResponse])
async def list_trips(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TripService, Depends(get_trip_service)],
    date: date | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    app_name: str | None = None,
    trip_type: str | None = None,
):
    """List the current user's trips, optionally filtered."""
    return service.list_trips(
        current_user.id,
        on_date=date,
        start_date=start_date,
        end_date=end_date,
        app_name=app_name,
        trip_type=trip_type,
    )


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TripService, Depends(get_trip_service)],
):
    """Get a specific trip."""
    return service.get_trip(trip_id, current_user.id)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: str,
    trip_data: TripPayload,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TripService, Depends(get_trip_service)],
):
    """Replace all fields of a trip."""
    return service.update_trip(trip_id, current_user.id, trip_data)


@router.delete("/{trip_id}", response_model=MessageResponse)
async def delete_trip(
    trip_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TripService, Depends(get_trip_service)],
):
    """Delete a trip."""
    service.delete_trip(trip_id, current_user.id)
    return MessageResponse(message="Trip deleted successfully")
