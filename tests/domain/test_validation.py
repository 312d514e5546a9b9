# tests/domain/test_validation.py
import pytest

from ride_share.domain.errors import (
    DuplicateRideIdError,
    InvalidDistanceError,
    InvalidRatingError,
    InvalidRideIdError,
    RideValidationError,
)
from ride_share.domain.validation import validate_rating, validate_ride


def test_accepts_valid_ride():
    seen: set[str] = set()
    validate_ride("S001", 0.0, seen)
    validate_ride("S002", 10.5, seen)
    assert seen == {"S001", "S002"}


@pytest.mark.parametrize("rid", ["", "   "])
def test_rejects_empty_id(rid):
    with pytest.raises(InvalidRideIdError):
        validate_ride(rid, 1.0)


@pytest.mark.parametrize("miles", [-0.1, float("nan"), float("inf")])
def test_rejects_bad_distance(miles):
    with pytest.raises(InvalidDistanceError):
        validate_ride("S001", miles)


def test_rejects_duplicate_id():
    seen = {"S001"}
    with pytest.raises(DuplicateRideIdError):
        validate_ride("S001", 1.0, seen)


@pytest.mark.parametrize("rating", [-1.0, 5.1, float("nan")])
def test_rejects_rating_off_scale(rating):
    with pytest.raises(InvalidRatingError):
        validate_rating(rating)


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_ride("S001", -1.0)
    assert issubclass(InvalidRatingError, RideValidationError)
