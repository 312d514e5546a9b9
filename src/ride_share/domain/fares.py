# domain/fares.py
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from ride_share.domain.entities.ride import Ride


@dataclass(frozen=True)
class FareStats:
    count: int = 0
    total: float = 0.0
    mean: float = 0.0
    maximum: float = 0.0


def fare_stats(rides: Iterable[Ride]) -> FareStats:
    fares = np.fromiter((r.fare for r in rides), dtype=float)
    if fares.size == 0:
        return FareStats()
    return FareStats(
        count=int(fares.size),
        total=float(fares.sum()),
        mean=float(fares.mean()),
        maximum=float(fares.max()),
    )
