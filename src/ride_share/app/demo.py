# ride_share/app/demo.py
import sys
from typing import TextIO

from ride_share.app.build import App, build
from ride_share.domain.entities.ride import RULE


def _ride(kind: str, rid: str, pickup: str, dropoff: str, miles: float) -> dict:
    return {"kind": kind, "id": rid, "pickup": pickup, "dropoff": dropoff, "distance_miles": miles}


_TRIPS = [
    ("standard", "S001", "Downtown", "Suburb A", 10.5),
    ("premium", "P002", "Airport", "City Center", 25.0),
    ("standard", "S003", "Park", "Museum", 3.2),
]

DEMO_SCENARIO = {
    "name": "demo",
    "run_id": "demo",
    "riders": [
        {"id": "R001", "name": "Sandesh Shrestha", "requested": [_ride(*t) for t in _TRIPS]},
    ],
    "drivers": [
        {
            "id": "D001",
            "name": "Alice Smith",
            "rating": 4.8,
            # separate ride objects for the same trips; the rider keeps the originals
            "completed": [_ride(k, f"{rid}-C", p, d, m) for k, rid, p, d, m in _TRIPS],
        },
    ],
    "system_rides": [
        _ride("standard", "SysR01", "Library", "Cafe", 7.0),
        _ride("premium", "SysR02", "Mall", "Home", 4.5),
        _ride("standard", "SysR03", "Gym", "Cafe", 2.0),
        _ride("premium", "SysR04", "School", "Park", 12.0),
    ],
}


def run(app: App, fp: TextIO | None = None) -> None:
    out = fp or sys.stdout
    print(f"--- {app.title} ---", file=out)

    for rider, rides in app.pending_requests:
        for ride in rides:
            rider.request_ride(ride)
    for driver, rides in app.pending_completions:
        for ride in rides:
            driver.add_ride(ride)

    for driver in app.drivers:
        driver.info(out)
    for rider in app.riders:
        rider.view_rides(out)

    print("\n--- Polymorphism Demonstration (List of All Rides in System) ---", file=out)
    for ride in app.system_rides:
        ride.details(out)
        print(RULE, file=out)

    print("\n--- Demonstration Complete ---", file=out)


def main() -> int:
    run(build(DEMO_SCENARIO))
    return 0
