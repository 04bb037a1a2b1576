"""Trip model."""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from riderwatch.database import Base
from riderwatch.models.enums import AppName, TripType
from riderwatch.models.mixins import TimestampMixin

TRIP_TIME_MAX_LENGTH = 20
TRIP_REF_MAX_LENGTH = 100


class Trip(Base, TimestampMixin):
    """A single paid trip recorded by a driver."""

    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    # "HH:MM", free-form
    trip_time = Column(String(TRIP_TIME_MAX_LENGTH), nullable=False, default="")
    # Reference from the ride-hailing app
    trip_id = Column(String(TRIP_REF_MAX_LENGTH), nullable=False, default="")
    app_name = Column(String(20), nullable=False, default=AppName.OTHER.value, index=True)
    trip_type = Column(String(20), nullable=False, default=TripType.PASSENGER.value)
    distance_km = Column(Float, nullable=False, default=0)
    amount_received = Column(Float, nullable=False, default=0)
    fees = Column(Float, nullable=False, default=0)
    fuel_cost = Column(Float, nullable=False, default=0)
    net_profit = Column(Float, nullable=False, default=0)  # amount_received - fees - fuel_cost
    notes = Column(Text, nullable=False, default="")

    # Relationships
    user = relationship("User", back_populates="trips")
