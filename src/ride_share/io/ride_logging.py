# io/ride_logging.py
import json
import logging
import sys

from ride_share.domain.hooks import NoopHooks
from ride_share.io.business_events import RideCompletedBiz, RideRequestedBiz
from ride_share.io.recorder import Recorder


def _default_json_logger(name="ride_share", level="WARNING"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RideLogging(NoopHooks):
    """
    Structured logs and business events for ride transfers.

    Every request/completion is logged at INFO (stderr, JSON) and, when a
    recorder is attached, emitted as a business event.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "WARNING",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    @staticmethod
    def _shape_ride(ride) -> dict:
        return {
            "ride_id": ride.id,
            "kind": ride.kind,
            "distance_miles": ride.distance_miles,
            "fare": ride.fare,
        }

    # ------------- Hooks --------------------------

    def ride_requested(self, rider, ride) -> None:
        seq = self._next_seq()
        self._emit("INFO", "RideRequested", rider_id=rider.id, seq=seq, **self._shape_ride(ride))
        if self.debug:
            self._emit("DEBUG", "rider_history", rider_id=rider.id, size=len(rider.requested_rides))
        self.biz(
            RideRequestedBiz(
                run_id=self.run_id, seq=seq, name="RideRequested", rider_id=rider.id, **self._shape_ride(ride)
            )
        )

    def ride_completed(self, driver, ride) -> None:
        seq = self._next_seq()
        self._emit("INFO", "RideCompleted", driver_id=driver.id, seq=seq, **self._shape_ride(ride))
        if self.debug:
            self._emit("DEBUG", "driver_history", driver_id=driver.id, size=len(driver.completed_rides))
        self.biz(
            RideCompletedBiz(
                run_id=self.run_id,
                seq=seq,
                name="RideCompleted",
                driver_id=driver.id,
                fare_cents=round(ride.fare * 100),
                **self._shape_ride(ride),
            )
        )

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
