"""Input rules for trips and fuel settings.

Validators collect every violated rule instead of stopping at the first one,
so a client can fix the whole form in a single round trip.
"""

import math
import re
from datetime import date

from riderwatch.models.enums import AppName, TripType
from riderwatch.models.trip import TRIP_REF_MAX_LENGTH, TRIP_TIME_MAX_LENGTH
from riderwatch.schemas.fuel_settings import FuelSettingsCreate
from riderwatch.schemas.trip import TripPayload

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str | None) -> date | None:
    """Parse a canonical YYYY-MM-DD string, returning None if it is not one."""
    if not value or not ISO_DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _amount_error(name: str, value: float | None, required: bool = True) -> str | None:
    """Rule message for a money or distance field, or None when it is fine."""
    if value is None:
        return f"{name} must be >= 0" if required else None
    if not math.isfinite(value):
        return f"{name} must be a finite number"
    if value < 0:
        return f"{name} must be >= 0"
    return None


def _too_long(name: str, value: str | None, max_length: int) -> str | None:
    if value and len(value) > max_length:
        return f"{name} must be at most {max_length} characters"
    return None


def validate_trip(payload: TripPayload) -> list[str]:
    """Return every rule the trip payload violates (empty when valid)."""
    errors = []
    if not payload.date:
        errors.append("date is required")
    elif parse_iso_date(payload.date) is None:
        errors.append("date must be a valid date (YYYY-MM-DD)")
    if not payload.app_name:
        errors.append("app_name is required")
    if not payload.trip_type:
        errors.append("trip_type is required")
    errors.extend(
        message
        for message in (
            _amount_error("distance_km", payload.distance_km),
            _amount_error("amount_received", payload.amount_received),
            _amount_error("fees", payload.fees),
            _amount_error("fuel_cost", payload.fuel_cost, required=False),
            _too_long("trip_time", payload.trip_time, TRIP_TIME_MAX_LENGTH),
            _too_long("trip_id", payload.trip_id, TRIP_REF_MAX_LENGTH),
        )
        if message
    )

    if payload.app_name and payload.app_name not in AppName.values():
        errors.append(f"app_name must be one of: {', '.join(AppName.values())}")
    if payload.trip_type and payload.trip_type not in TripType.values():
        errors.append(f"trip_type must be one of: {', '.join(TripType.values())}")

    return errors


def _positive_error(name: str, value: float | None) -> str | None:
    if value is not None and not math.isfinite(value):
        return f"{name} must be a finite number"
    if value is None or value <= 0:
        return f"{name} must be > 0"
    return None


def validate_fuel_settings(payload: FuelSettingsCreate) -> list[str]:
    """Return every rule the fuel settings payload violates (empty when valid)."""
    errors = [
        message
        for message in (
            _positive_error("fuel_efficiency_kmpl", payload.fuel_efficiency_kmpl),
            _positive_error("fuel_price_per_liter", payload.fuel_price_per_liter),
        )
        if message
    ]
    if payload.effective_from and parse_iso_date(payload.effective_from) is None:
        errors.append("effective_from must be a valid date (YYYY-MM-DD)")
    return errors


def calculate_net_profit(amount_received: float, fees: float, fuel_cost: float = 0.0) -> float:
    """Net profit of a trip: what was received minus fees and fuel."""
    return amount_received - fees - fuel_cost
