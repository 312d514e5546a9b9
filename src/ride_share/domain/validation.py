# domain/validation.py
from math import isfinite

from ride_share.domain.errors import (
    DuplicateRideIdError,
    InvalidDistanceError,
    InvalidRatingError,
    InvalidRideIdError,
)

MAX_RATING = 5.0


def validate_ride(ride_id: str, distance_miles: float, seen_ids: set[str] | None = None) -> None:
    if not ride_id or not ride_id.strip():
        raise InvalidRideIdError("ride id must be non-empty")
    if not isfinite(distance_miles) or distance_miles < 0:
        raise InvalidDistanceError(f"ride {ride_id!r}: distance must be >= 0, got {distance_miles}")
    if seen_ids is not None:
        if ride_id in seen_ids:
            raise DuplicateRideIdError(f"ride id {ride_id!r} already used")
        seen_ids.add(ride_id)


def validate_rating(rating: float) -> None:
    if not isfinite(rating) or not (0.0 <= rating <= MAX_RATING):
        raise InvalidRatingError(f"rating must be within 0-{MAX_RATING}, got {rating}")
