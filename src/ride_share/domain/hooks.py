# domain/hooks.py
import sys
from typing import Protocol, TextIO


class RideHooks(Protocol):
    def ride_requested(self, rider, ride) -> None: ...
    def ride_completed(self, driver, ride) -> None: ...


class NoopHooks:
    def ride_requested(self, *_, **__):
        pass

    def ride_completed(self, *_, **__):
        pass


class EchoHooks(NoopHooks):
    """Prints each ride request to a text stream (stdout unless given)."""

    def __init__(self, fp: TextIO | None = None):
        self.fp = fp

    def ride_requested(self, rider, ride) -> None:
        out = self.fp or sys.stdout
        print(f"\n{rider.name} requested a ride.", file=out)
        ride.details(out)


class FanoutHooks(NoopHooks):
    def __init__(self, *hooks: RideHooks):
        self.hooks = hooks

    def ride_requested(self, rider, ride) -> None:
        for h in self.hooks:
            h.ride_requested(rider, ride)

    def ride_completed(self, driver, ride) -> None:
        for h in self.hooks:
            h.ride_completed(driver, ride)
