"""Fuel settings history model."""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from riderwatch.database import Base
from riderwatch.models.mixins import CreatedAtMixin


class FuelSettingsRecord(Base, CreatedAtMixin):
    """Fuel efficiency and price, effective from a date until superseded.

    Rows are never updated; a change is a new row with a later effective_from.
    """

    __tablename__ = "fuel_settings_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    fuel_efficiency_kmpl = Column(Float, nullable=False)
    fuel_price_per_liter = Column(Float, nullable=False)
    effective_from = Column(Date, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="fuel_settings")
