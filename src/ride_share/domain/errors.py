# domain/errors.py


class RideError(Exception):
    pass


class RideValidationError(RideError, ValueError):
    pass


class InvalidDistanceError(RideValidationError):
    pass


class InvalidRideIdError(RideValidationError):
    pass


class DuplicateRideIdError(RideValidationError):
    pass


class InvalidRatingError(RideValidationError):
    pass


class UnknownRideKindError(RideError, ValueError):
    pass


class RideOwnershipError(RideError):
    """Raised when a ride is moved into a second history."""
