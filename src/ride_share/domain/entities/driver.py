# domain/entities/driver.py
import sys
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.domain.entities.ride import Ride, render_history
from ride_share.domain.fares import FareStats, fare_stats
from ride_share.domain.hooks import NoopHooks, RideHooks


@dataclass
class Driver:
    id: str
    name: str
    rating: float  # 0-5
    completed_rides: list[Ride] = field(default_factory=list)
    hooks: RideHooks = field(default_factory=NoopHooks, repr=False, compare=False)

    @property
    def history(self) -> tuple[Ride, ...]:
        return tuple(self.completed_rides)

    def add_ride(self, ride: Ride) -> None:
        ride.claim(self.id)
        self.completed_rides.append(ride)
        self.hooks.ride_completed(self, ride)

    def fare_summary(self) -> FareStats:
        return fare_stats(self.completed_rides)

    def describe(self) -> str:
        header = (
            "\n--- Driver Details ---\n"
            f"Driver ID: {self.id}\n"
            f"Name: {self.name}\n"
            f"Rating: {self.rating:.1f}/5.0\n"
            f"Completed Rides ({len(self.completed_rides)}):"
        )
        return header + "\n" + render_history(self.completed_rides, "  No rides completed yet.")

    def info(self, fp: TextIO | None = None) -> None:
        print(self.describe(), file=fp or sys.stdout)
