"""Report API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends

from riderwatch.api.dependencies import get_current_user, get_report_service
from riderwatch.errors import ValidationError
from riderwatch.models.user import User
from riderwatch.schemas.report import AnnualReport, DailyReport, DashboardReport, MonthlyReport
from riderwatch.services.report_service import ReportService

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/dashboard", response_model=DashboardReport)
async def dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
):
    """Today's overview."""
    return service.dashboard(current_user.id)


@router.get("/daily", response_model=DailyReport)
async def daily_report(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
    date: date | None = None,
):
    """Totals, trips and app breakdown for one day."""
    if date is None:
        raise ValidationError(details=["date query parameter is required (YYYY-MM-DD)"])
    return service.daily(current_user.id, date)


@router.get("/monthly", response_model=MonthlyReport)
async def monthly_report(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
    year: int | None = None,
    month: int | None = None,
):
    """Totals with day-by-day and app breakdowns for one month."""
    if year is None or month is None:
        raise ValidationError(details=["year and month query parameters are required"])
    return service.monthly(current_user.id, year, month)


@router.get("/annual", response_model=AnnualReport)
async def annual_report(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ReportService, Depends(get_report_service)],
    year: int | None = None,
):
    """Totals with month-by-month and app breakdowns for one year."""
    if year is None:
        raise ValidationError(details=["year query parameter is required"])
    return service.annual(current_user.id, year)
