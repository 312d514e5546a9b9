# domain/entities/rider.py
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.domain.entities.ride import Ride, render_history
from ride_share.domain.errors import RideOwnershipError
from ride_share.domain.fares import FareStats, fare_stats
from ride_share.domain.hooks import EchoHooks, RideHooks


@dataclass
class Rider:
    id: str
    name: str
    requested_rides: list[Ride] = field(default_factory=list)
    hooks: RideHooks = field(default_factory=EchoHooks, repr=False, compare=False)

    @property
    def history(self) -> tuple[Ride, ...]:
        return tuple(self.requested_rides)

    def request_ride(self, ride: Ride) -> None:
        if ride.owner is not None:
            raise RideOwnershipError(f"ride {ride.id!r} already belongs to {ride.owner!r}")
        # hooks see the ride before it is stored; a failing hook leaves it unclaimed
        self.hooks.ride_requested(self, ride)
        ride.claim(self.id)
        self.requested_rides.append(ride)

    def fare_summary(self) -> FareStats:
        return fare_stats(self.requested_rides)

    def describe_history(self) -> str:
        return f"\n--- {self.name}'s Ride History ---\n" + render_history(
            self.requested_rides, "  No rides requested yet."
        )

    def view_rides(self, fp: TextIO | None = None) -> None:
        print(self.describe_history(), file=fp or sys.stdout)
