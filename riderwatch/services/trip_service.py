"""Trip service: validated, user-scoped trip writes and lookups."""

import logging
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from riderwatch.errors import NotFoundError, ValidationError
from riderwatch.models.trip import Trip
from riderwatch.schemas.trip import TripPayload
from riderwatch.services.validation import calculate_net_profit, parse_iso_date, validate_trip

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_ROW_ID = 2**63 - 1


def parse_row_id(value: int | str) -> int | None:
    """Return value as a positive row id, or None when no row can have it."""
    try:
        row_id = int(value)
    except (TypeError, ValueError):
        return None
    if not 1 <= row_id <= MAX_ROW_ID:
        return None
    return row_id


class TripService:
    """Service for trip CRUD, always scoped to one owner."""

    def __init__(self, db: Session):
        self.db = db

    def _apply(self, trip: Trip, payload: TripPayload) -> None:
        """Copy a validated payload onto a trip and recompute its profit."""
        errors = validate_trip(payload)
        if errors:
            raise ValidationError(details=errors)

        fuel_cost = payload.fuel_cost or 0.0
        trip.date = parse_iso_date(payload.date)
        trip.trip_time = payload.trip_time or ""
        trip.trip_id = payload.trip_id or ""
        trip.app_name = payload.app_name
        trip.trip_type = payload.trip_type
        trip.distance_km = payload.distance_km
        trip.amount_received = payload.amount_received
        trip.fees = payload.fees
        trip.fuel_cost = fuel_cost
        trip.net_profit = calculate_net_profit(payload.amount_received, payload.fees, fuel_cost)
        trip.notes = payload.notes or ""

    def get_trip(self, trip_id: int | str, user_id: int) -> Trip:
        """Get a trip owned by the user; anyone else's trip is reported as missing.

        Ids that are not integers in the storable range cannot exist either.
        """
        row_id = parse_row_id(trip_id)
        trip = None
        if row_id is not None:
            trip = self.db.query(Trip).filter(Trip.id == row_id, Trip.user_id == user_id).first()
        if not trip:
            raise NotFoundError("Trip not found")
        return trip

    def list_trips(
        self,
        user_id: int,
        on_date: date | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        app_name: str | None = None,
        trip_type: str | None = None,
    ) -> list[Trip]:
        """List the user's trips, newest first.

        The date range only applies when both ends are given.
        """
        query = self.db.query(Trip).filter(Trip.user_id == user_id)
        if on_date:
            query = query.filter(Trip.date == on_date)
        if start_date and end_date:
            query = query.filter(Trip.date.between(start_date, end_date))
        if app_name:
            query = query.filter(Trip.app_name == app_name)
        if trip_type:
            query = query.filter(Trip.trip_type == trip_type)

        return query.order_by(
            Trip.date.desc(),
            Trip.trip_time.desc(),
            Trip.created_at.desc(),
            Trip.id.desc(),
        ).all()

    def create_trip(self, user_id: int, payload: TripPayload) -> Trip:
        trip = Trip(user_id=user_id)
        self._apply(trip, payload)
        self.db.add(trip)
        self.db.commit()
        self.db.refresh(trip)
        logger.info(f"Created trip {trip.id} for user {user_id}: net profit {trip.net_profit}")
        return trip

    def update_trip(self, trip_id: int | str, user_id: int, payload: TripPayload) -> Trip:
        """Replace every field of a trip.

        Concurrent updates to the same trip are last-writer-wins.
        """
        trip = self.get_trip(trip_id, user_id)
        self._apply(trip, payload)
        trip.updated_at = func.now()
        self.db.commit()
        self.db.refresh(trip)
        logger.info(f"Updated trip {trip.id} for user {user_id}")
        return trip

    def delete_trip(self, trip_id: int | str, user_id: int) -> None:
        trip = self.get_trip(trip_id, user_id)
        self.db.delete(trip)
        self.db.commit()
        logger.info(f"Deleted trip {trip.id} for user {user_id}")
