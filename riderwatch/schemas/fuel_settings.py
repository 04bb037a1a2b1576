"""Fuel settings schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class FuelSettingsCreate(BaseModel):
    """New fuel settings, effective from the given date (today when omitted)."""

    fuel_efficiency_kmpl: float | None = None
    fuel_price_per_liter: float | None = None
    effective_from: str | None = None


class FuelSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    fuel_efficiency_kmpl: float
    fuel_price_per_liter: float
    effective_from: date
    created_at: datetime


class CurrentFuelSettings(BaseModel):
    configured: bool
    settings: FuelSettingsResponse | None


class FuelSettingsForDate(BaseModel):
    date: date
    settings: FuelSettingsResponse | None
