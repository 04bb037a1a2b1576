"""Trip schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class TripPayload(BaseModel):
    """Trip create/update request.

    Fields are loosely typed so that every rule violation can be reported
    together by the trip validator. Any ``net_profit`` sent by the client
    is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    date: str | None = None
    trip_time: str | None = None
    trip_id: str | None = None
    app_name: str | None = None
    trip_type: str | None = None
    distance_km: float | None = None
    amount_received: float | None = None
    fees: float | None = None
    fuel_cost: float | None = None
    notes: str | None = None


class TripResponse(BaseModel):
    """Trip response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    date: date
    trip_time: str
    trip_id: str
    app_name: str
    trip_type: str
    distance_km: float
    amount_received: float
    fees: float
    fuel_cost: float
    net_profit: float
    notes: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
