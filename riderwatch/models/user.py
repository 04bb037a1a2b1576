"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from riderwatch.database import Base
from riderwatch.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # Lowercase, trimmed
    password_hash = Column(String(255), nullable=False)

    # Relationships
    trips = relationship("Trip", back_populates="user", passive_deletes=True)
    fuel_settings = relationship("FuelSettingsRecord", back_populates="user", passive_deletes=True)
