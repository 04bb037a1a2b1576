"""Trip and fuel settings validation tests."""

from datetime import date

from riderwatch.schemas.fuel_settings import FuelSettingsCreate
from riderwatch.schemas.trip import TripPayload
from riderwatch.services.validation import (
    calculate_net_profit,
    parse_iso_date,
    validate_fuel_settings,
    validate_trip,
)


def test_valid_trip_has_no_errors(trip_data):
    assert validate_trip(TripPayload(**trip_data)) == []


def test_fuel_cost_is_optional(trip_data):
    trip_data.pop("fuel_cost")
    assert validate_trip(TripPayload(**trip_data)) == []


def test_empty_trip_reports_every_missing_field():
    errors = validate_trip(TripPayload())
    assert errors == [
        "date is required",
        "app_name is required",
        "trip_type is required",
        "distance_km must be >= 0",
        "amount_received must be >= 0",
        "fees must be >= 0",
    ]


def test_negative_amounts_and_unknown_enums(trip_data):
    trip_data.update(
        distance_km=-1,
        fees=-0.5,
        fuel_cost=-10,
        app_name="Lyft",
        trip_type="Parcel",
    )
    errors = validate_trip(TripPayload(**trip_data))
    assert errors == [
        "distance_km must be >= 0",
        "fees must be >= 0",
        "fuel_cost must be >= 0",
        "app_name must be one of: Pickme, Helago, Uber, Other",
        "trip_type must be one of: Passenger, Goods",
    ]


def test_zero_amounts_are_allowed(trip_data):
    trip_data.update(distance_km=0, amount_received=0, fees=0, fuel_cost=0)
    assert validate_trip(TripPayload(**trip_data)) == []


def test_non_canonical_date_is_rejected(trip_data):
    trip_data["date"] = "2024-3-5"
    assert validate_trip(TripPayload(**trip_data)) == ["date must be a valid date (YYYY-MM-DD)"]


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    assert parse_iso_date("2023-02-29") is None
    assert parse_iso_date("15/03/2024") is None
    assert parse_iso_date("") is None
    assert parse_iso_date(None) is None


def test_calculate_net_profit():
    assert calculate_net_profit(1500.0, 225.0, 300.0) == 975.0
    assert calculate_net_profit(100.0, 20.0) == 80.0
    assert calculate_net_profit(10.0, 15.0, 5.0) == -10.0


def test_fuel_settings_must_be_positive():
    errors = validate_fuel_settings(
        FuelSettingsCreate(fuel_efficiency_kmpl=0, fuel_price_per_liter=-1)
    )
    assert errors == [
        "fuel_efficiency_kmpl must be > 0",
        "fuel_price_per_liter must be > 0",
    ]


def test_fuel_settings_effective_from_must_be_a_date():
    errors = validate_fuel_settings(
        FuelSettingsCreate(
            fuel_efficiency_kmpl=12.5, fuel_price_per_liter=370, effective_from="next week"
        )
    )
    assert errors == ["effective_from must be a valid date (YYYY-MM-DD)"]


def test_non_finite_amounts_are_rejected(trip_data):
    trip_data.update(distance_km=float("nan"), fuel_cost=float("inf"))
    errors = validate_trip(TripPayload(**trip_data))
    assert errors == [
        "distance_km must be a finite number",
        "fuel_cost must be a finite number",
    ]


def test_trip_text_fields_at_column_limits(trip_data):
    trip_data.update(trip_time="x" * 20, trip_id="R" * 100)
    assert validate_trip(TripPayload(**trip_data)) == []


def test_fuel_settings_must_be_finite():
    errors = validate_fuel_settings(
        FuelSettingsCreate(fuel_efficiency_kmpl=float("inf"), fuel_price_per_liter=370)
    )
    assert errors == ["fuel_efficiency_kmpl must be a finite number"]
