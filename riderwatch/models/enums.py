"""Enums for model fields."""

from enum import Enum


class AppName(str, Enum):
    """Ride-hailing apps a trip can come from."""

    PICKME = "Pickme"
    HELAGO = "Helago"
    UBER = "Uber"
    OTHER = "Other"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class TripType(str, Enum):
    """What the trip carried."""

    PASSENGER = "Passenger"
    GOODS = "Goods"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
