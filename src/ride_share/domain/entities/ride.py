# domain/entities/ride.py
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, TextIO

from ride_share.domain.errors import RideOwnershipError

RULE = "-" * 20


@dataclass(frozen=True)
class Ride(ABC):
    """
    A single trip with a fare fixed at construction.

    Subclasses provide the pricing rule through `calculate_fare`; the result is
    stored once in `fare` and never recomputed.
    """

    kind: ClassVar[str] = ""

    id: str
    pickup: str
    dropoff: str
    distance_miles: float  # miles
    fare: float = field(init=False)
    owner: str | None = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "fare", self.calculate_fare())

    @abstractmethod
    def calculate_fare(self) -> float: ...

    def claim(self, owner_id: str) -> None:
        if self.owner is not None:
            raise RideOwnershipError(f"ride {self.id!r} already belongs to {self.owner!r}")
        object.__setattr__(self, "owner", owner_id)

    def describe(self) -> str:
        return (
            f"Ride ID: {self.id}\n"
            f"  Pickup: {self.pickup}\n"
            f"  Dropoff: {self.dropoff}\n"
            f"  Distance: {self.distance_miles:.1f} miles\n"
            f"  Fare: ${self.fare:.2f}"
        )

    def details(self, fp: TextIO | None = None) -> None:
        print(self.describe(), file=fp or sys.stdout)


class StandardRide(Ride):
    kind: ClassVar[str] = "standard"
    RATE_PER_MILE: ClassVar[float] = 2.0

    def calculate_fare(self) -> float:
        return self.distance_miles * self.RATE_PER_MILE


class PremiumRide(Ride):
    kind: ClassVar[str] = "premium"
    RATE_PER_MILE: ClassVar[float] = 3.5
    PREMIUM_SURCHARGE: ClassVar[float] = 5.0  # flat, per ride

    def calculate_fare(self) -> float:
        return self.distance_miles * self.RATE_PER_MILE + self.PREMIUM_SURCHARGE


def render_history(rides, empty: str) -> str:
    """Ride blocks each followed by a rule, or the `empty` line."""
    if not rides:
        return empty
    return "\n".join(f"{r.describe()}\n{RULE}" for r in rides)
