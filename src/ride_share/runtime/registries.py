# runtime/registries.py
from collections.abc import Callable

from ride_share.config.models import PremiumRideModel, RideUnion, StandardRideModel
from ride_share.domain.entities.ride import PremiumRide, Ride, StandardRide
from ride_share.domain.errors import UnknownRideKindError
from ride_share.domain.validation import validate_ride

RideFactory = Callable[[RideUnion, dict], Ride]

_ride_registry: dict[str, RideFactory] = {}


def register_ride_kind(kind: str):
    def deco(fn: RideFactory):
        _ride_registry[kind] = fn
        return fn

    return deco


def ride_kinds() -> list[str]:
    return sorted(_ride_registry)


def make_ride(cfg: RideUnion, *, deps: dict | None = None) -> Ride:
    """
    deps can include:
      - 'strict': bool            # run validate_ride before building
      - 'seen_ids': set[str]      # ids used so far, for duplicate detection
    """
    deps = deps or {}
    try:
        factory = _ride_registry[cfg.kind]
    except KeyError:
        raise UnknownRideKindError(f"Unknown ride kind {cfg.kind!r}") from None
    if deps.get("strict"):
        validate_ride(cfg.id, cfg.distance_miles, deps.get("seen_ids"))
    return factory(cfg, deps)


@register_ride_kind("standard")
def _make_standard(cfg: StandardRideModel, deps):
    return StandardRide(cfg.id, cfg.pickup, cfg.dropoff, cfg.distance_miles)


@register_ride_kind("premium")
def _make_premium(cfg: PremiumRideModel, deps):
    return PremiumRide(cfg.id, cfg.pickup, cfg.dropoff, cfg.distance_miles)
