"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID, uuid4

# Matches the decimal_places of the persisted columns.
COORDINATE_PRECISION = Decimal("0.000001")
AMOUNT_PRECISION = Decimal("0.01")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Location:
    """Geographic coordinates in decimal degrees, kept to 6 decimal places."""

    latitude: Decimal
    longitude: Decimal

    def __post_init__(self) -> None:
        if not Decimal(-90) <= self.latitude <= Decimal(90):
            raise ValueError("Latitude must be between -90 and 90")
        if not Decimal(-180) <= self.longitude <= Decimal(180):
            raise ValueError("Longitude must be between -180 and 180")
        object.__setattr__(
            self, "latitude", Decimal(self.latitude).quantize(COORDINATE_PRECISION)
        )
        object.__setattr__(
            self, "longitude", Decimal(self.longitude).quantize(COORDINATE_PRECISION)
        )


@dataclass(frozen=True)
class PriceTier:
    """One entry of an event's price list, amount kept to cents."""

    amount: Decimal
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "amount", Decimal(self.amount).quantize(AMOUNT_PRECISION)
        )
        if self.amount < 0:
            raise ValueError("Price amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
