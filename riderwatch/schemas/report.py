"""Report schemas."""

from datetime import date

from pydantic import BaseModel

from riderwatch.schemas.trip import TripResponse


class ReportSummary(BaseModel):
    """Totals over every trip in the report period."""

    total_trips: int = 0
    total_distance: float = 0.0
    total_earnings: float = 0.0
    total_fees: float = 0.0
    total_fuel_cost: float = 0.0
    total_net_profit: float = 0.0


class AppBreakdown(BaseModel):
    app_name: str
    trips: int
    earnings: float
    fees: float
    fuel_cost: float
    net_profit: float


class PeriodTotals(BaseModel):
    trips: int
    distance: float
    earnings: float
    fees: float
    fuel_cost: float
    net_profit: float


class DayBreakdown(PeriodTotals):
    date: date


class MonthBreakdown(PeriodTotals):
    month: str  # YYYY-MM


class DashboardReport(BaseModel):
    date: date
    summary: ReportSummary
    by_app: list[AppBreakdown]


class DailyReport(BaseModel):
    date: date
    summary: ReportSummary
    trips: list[TripResponse]
    by_app: list[AppBreakdown]


class MonthlyReport(BaseModel):
    year: int
    month: int
    summary: ReportSummary
    daily_breakdown: list[DayBreakdown]
    by_app: list[AppBreakdown]


class AnnualReport(BaseModel):
    year: int
    summary: ReportSummary
    monthly_breakdown: list[MonthBreakdown]
    by_app: list[AppBreakdown]
