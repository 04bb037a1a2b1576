"""Fuel settings service: append-only history and effective-date lookup."""

import logging
from datetime import date

from sqlalchemy.orm import Session

from riderwatch.errors import ValidationError
from riderwatch.models.fuel_settings import FuelSettingsRecord
from riderwatch.schemas.fuel_settings import FuelSettingsCreate
from riderwatch.services.validation import parse_iso_date, validate_fuel_settings

logger = logging.getLogger(__name__)


class FuelSettingsService:
    """Service for a user's fuel settings history."""

    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, user_id: int):
        return (
            self.db.query(FuelSettingsRecord)
            .filter(FuelSettingsRecord.user_id == user_id)
            .order_by(FuelSettingsRecord.effective_from.desc(), FuelSettingsRecord.id.desc())
        )

    def current(self, user_id: int) -> FuelSettingsRecord | None:
        """The most recent record: latest effective_from, then latest inserted."""
        return self._newest_first(user_id).first()

    def for_date(self, user_id: int, on_date: date) -> FuelSettingsRecord | None:
        """The record in effect on a date, or None if the date predates all history."""
        return (
            self._newest_first(user_id)
            .filter(FuelSettingsRecord.effective_from <= on_date)
            .first()
        )

    def history(self, user_id: int) -> list[FuelSettingsRecord]:
        return self._newest_first(user_id).all()

    def create(
        self, user_id: int, payload: FuelSettingsCreate, today: date | None = None
    ) -> FuelSettingsRecord:
        """Record new settings; they take effect from effective_from (default today)."""
        errors = validate_fuel_settings(payload)
        if errors:
            raise ValidationError(details=errors)

        effective_from = parse_iso_date(payload.effective_from) or today or date.today()
        record = FuelSettingsRecord(
            user_id=user_id,
            fuel_efficiency_kmpl=payload.fuel_efficiency_kmpl,
            fuel_price_per_liter=payload.fuel_price_per_liter,
            effective_from=effective_from,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info(
            f"Saved fuel settings {record.id} for user {user_id} "
            f"effective from {record.effective_from}"
        )
        return record
