"""Report service: earnings aggregations over a user's trips.

Every report is a summary over one period plus one or more breakdowns:
by source app, and for the longer periods by day or by month.
"""

import calendar
import logging
from datetime import date
from typing import Any

from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from riderwatch.errors import ValidationError
from riderwatch.models.trip import Trip
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
from riderwatch.schemas.trip import TripResponse

logger = logging.getLogger(__name__)


def _total(column: Any) -> Any:
    return func.coalesce(func.sum(column), 0.0)


def _period_totals() -> list[Any]:
    """Aggregate columns shared by every breakdown row."""
    return [
        func.count(Trip.id).label("trips"),
        _total(Trip.distance_km).label("distance"),
        _total(Trip.amount_received).label("earnings"),
        _total(Trip.fees).label("fees"),
        _total(Trip.fuel_cost).label("fuel_cost"),
        _total(Trip.net_profit).label("net_profit"),
    ]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def check_year(year: int) -> None:
    if not 1 <= year <= 9999:
        raise ValidationError(details=["year must be between 1 and 9999"])


def check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValidationError(details=["month must be between 1 and 12"])


class ReportService:
    """Service for dashboard, daily, monthly and annual reports."""

    def __init__(self, db: Session):
        self.db = db

    def _summary(self, filters: list[Any]) -> ReportSummary:
        row = (
            self.db.query(
                func.count(Trip.id).label("total_trips"),
                _total(Trip.distance_km).label("total_distance"),
                _total(Trip.amount_received).label("total_earnings"),
                _total(Trip.fees).label("total_fees"),
                _total(Trip.fuel_cost).label("total_fuel_cost"),
                _total(Trip.net_profit).label("total_net_profit"),
            )
            .filter(*filters)
            .one()
        )
        return ReportSummary(**row._asdict())

    def _by_app(self, filters: list[Any]) -> list[AppBreakdown]:
        rows = (
            self.db.query(
                Trip.app_name,
                func.count(Trip.id).label("trips"),
                _total(Trip.amount_received).label("earnings"),
                _total(Trip.fees).label("fees"),
                _total(Trip.fuel_cost).label("fuel_cost"),
                _total(Trip.net_profit).label("net_profit"),
            )
            .filter(*filters)
            .group_by(Trip.app_name)
            .order_by(Trip.app_name)
            .all()
        )
        return [AppBreakdown(**row._asdict()) for row in rows]

    def _by_day(self, filters: list[Any]) -> list[DayBreakdown]:
        rows = (
            self.db.query(Trip.date, *_period_totals())
            .filter(*filters)
            .group_by(Trip.date)
            .order_by(Trip.date)
            .all()
        )
        return [DayBreakdown(**row._asdict()) for row in rows]

    def _by_month(self, year: int, filters: list[Any]) -> list[MonthBreakdown]:
        month_number = extract("month", Trip.date)
        rows = (
            self.db.query(month_number.label("month_number"), *_period_totals())
            .filter(*filters)
            .group_by(month_number)
            .order_by(month_number)
            .all()
        )
        breakdown = []
        for row in rows:
            values = row._asdict()
            month_number_value = int(values.pop("month_number"))
            breakdown.append(MonthBreakdown(month=f"{year:04d}-{month_number_value:02d}", **values))
        return breakdown

    def dashboard(self, user_id: int, today: date | None = None) -> DashboardReport:
        """Today's totals, by the server's local calendar date."""
        today = today or date.today()
        filters = [Trip.user_id == user_id, Trip.date == today]
        return DashboardReport(
            date=today,
            summary=self._summary(filters),
            by_app=self._by_app(filters),
        )

    def daily(self, user_id: int, day: date) -> DailyReport:
        filters = [Trip.user_id == user_id, Trip.date == day]
        trips = (
            self.db.query(Trip)
            .filter(*filters)
            .order_by(Trip.trip_time.desc(), Trip.created_at.desc(), Trip.id.desc())
            .all()
        )
        return DailyReport(
            date=day,
            summary=self._summary(filters),
            trips=[TripResponse.model_validate(trip) for trip in trips],
            by_app=self._by_app(filters),
        )

    def monthly(self, user_id: int, year: int, month: int) -> MonthlyReport:
        check_year(year)
        check_month(month)
        start, end = month_bounds(year, month)
        filters = [Trip.user_id == user_id, Trip.date.between(start, end)]
        logger.debug(f"Monthly report for user {user_id}: {start} to {end}")
        return MonthlyReport(
            year=year,
            month=month,
            summary=self._summary(filters),
            daily_breakdown=self._by_day(filters),
            by_app=self._by_app(filters),
        )

    def annual(self, user_id: int, year: int) -> AnnualReport:
        check_year(year)
        start, end = year_bounds(year)
        filters = [Trip.user_id == user_id, Trip.date.between(start, end)]
        logger.debug(f"Annual report for user {user_id}: {start} to {end}")
        return AnnualReport(
            year=year,
            summary=self._summary(filters),
            monthly_breakdown=self._by_month(year, filters),
            by_app=self._by_app(filters),
        )
