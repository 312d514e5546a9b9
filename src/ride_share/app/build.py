# ride_share/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TextIO

from ride_share.config.models import RideUnion, ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider
from ride_share.domain.hooks import EchoHooks, FanoutHooks, NoopHooks
from ride_share.domain.validation import validate_rating
from ride_share.io.recorder import Recorder
from ride_share.io.ride_logging import RideLogging
from ride_share.runtime.registries import make_ride


@dataclass
class App:
    title: str
    riders: list[Rider]
    drivers: list[Driver]
    # rides built up front, handed over to their owners when the demo runs
    pending_requests: list[tuple[Rider, list[Ride]]] = field(default_factory=list)
    pending_completions: list[tuple[Driver, list[Ride]]] = field(default_factory=list)
    system_rides: list[Ride] = field(default_factory=list)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    fp: TextIO | None = None,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks: console echo for rider requests, plus structured logs
    echo = EchoHooks(fp)
    logging_hooks = (
        RideLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )
    rider_hooks = FanoutHooks(echo, logging_hooks)
    driver_hooks = FanoutHooks(logging_hooks)

    # 2) Ride factory deps
    strict = model.validation.strict
    deps = {"strict": strict, "seen_ids": set()}

    def _rides(cfgs: list[RideUnion]) -> list[Ride]:
        return [make_ride(c, deps=deps) for c in cfgs]

    # 3) Parties and their rides
    riders, pending_requests = [], []
    for rc in model.riders:
        rider = Rider(id=rc.id, name=rc.name, hooks=rider_hooks)
        riders.append(rider)
        pending_requests.append((rider, _rides(rc.requested)))

    drivers, pending_completions = [], []
    for dc in model.drivers:
        if strict:
            validate_rating(dc.rating)
        driver = Driver(id=dc.id, name=dc.name, rating=dc.rating, hooks=driver_hooks)
        drivers.append(driver)
        pending_completions.append((driver, _rides(dc.completed)))

    return App(
        title=model.title,
        riders=riders,
        drivers=drivers,
        pending_requests=pending_requests,
        pending_completions=pending_completions,
        system_rides=_rides(model.system_rides),
    )
