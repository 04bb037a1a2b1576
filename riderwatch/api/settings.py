"""Fuel settings API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, status

from riderwatch.api.dependencies import get_current_user, get_fuel_settings_service
from riderwatch.errors import ValidationError
from riderwatch.models.user import User
from riderwatch.schemas.fuel_settings import (
    CurrentFuelSettings,
    FuelSettingsCreate,
    FuelSettingsForDate,
    FuelSettingsResponse,
)
from riderwatch.services.fuel_settings_service import FuelSettingsService

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=CurrentFuelSettings)
async def get_current_settings(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FuelSettingsService, Depends(get_fuel_settings_service)],
):
    """Get the latest fuel settings."""
    record = service.current(current_user.id)
    return CurrentFuelSettings(
        configured=record is not None,
        settings=FuelSettingsResponse.model_validate(record) if record else None,
    )


@router.get("/for-date", response_model=FuelSettingsForDate)
async def get_settings_for_date(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FuelSettingsService, Depends(get_fuel_settings_service)],
    date: date | None = None,
):
    """Get the fuel settings in effect on a date."""
    if date is None:
        raise ValidationError(details=["date query parameter is required (YYYY-MM-DD)"])
    record = service.for_date(current_user.id, date)
    return FuelSettingsForDate(
        date=date,
        settings=FuelSettingsResponse.model_validate(record) if record else None,
    )


@router.get("/history", response_model=list[FuelSettingsResponse])
async def get_settings_history(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FuelSettingsService, Depends(get_fuel_settings_service)],
):
    """Get every settings change, most recent first."""
    return service.history(current_user.id)


@router.post("", response_model=FuelSettingsResponse, status_code=status.HTTP_201_CREATED)
async def save_settings(
    settings_data: FuelSettingsCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[FuelSettingsService, Depends(get_fuel_settings_service)],
):
    """Save new fuel settings as a new history entry."""
    return service.create(current_user.id, settings_data)
