"""Pydantic schemas for API requests and responses."""

from riderwatch.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from riderwatch.schemas.fuel_settings import (
    CurrentFuelSettings,
    FuelSettingsCreate,
    FuelSettingsForDate,
    FuelSettingsResponse,
)
from riderwatch.schemas.report import (
    AnnualReport,
    AppBreakdown,
    DailyReport,
    DashboardReport,
    DayBreakdown,
    MonthBreakdown,
    MonthlyReport,
    ReportSummary,
)
from riderwatch.schemas.trip import MessageResponse, TripPayload, TripResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "TripPayload",
    "TripResponse",
    "MessageResponse",
    "ReportSummary",
    "AppBreakdown",
    "DayBreakdown",
    "MonthBreakdown",
    "DashboardReport",
    "DailyReport",
    "MonthlyReport",
    "AnnualReport",
    "FuelSettingsCreate",
    "FuelSettingsResponse",
    "CurrentFuelSettings",
    "FuelSettingsForDate",
]
