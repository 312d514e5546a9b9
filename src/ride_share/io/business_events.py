# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class RideRequestedBiz(BizEvent):
    rider_id: str
    ride_id: str
    kind: str  # "standard" | "premium"
    distance_miles: float
    fare: float


@dataclass
class RideCompletedBiz(BizEvent):
    driver_id: str
    ride_id: str
    kind: str  # "standard" | "premium"
    distance_miles: float
    fare: float
    fare_cents: int | None = None
