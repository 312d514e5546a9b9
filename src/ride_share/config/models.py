from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    debug: bool = False


class ValidationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # off by default: bad distances or ids flow through to the fare unchecked
    strict: bool = False


# ----------------- RIDES ---------------------


class StandardRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"
    id: str
    pickup: str
    dropoff: str
    distance_miles: float


class PremiumRideModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["premium"] = "premium"
    id: str
    pickup: str
    dropoff: str
    distance_miles: float


RideUnion = Annotated[StandardRideModel | PremiumRideModel, Field(discriminator="kind")]


# ----------------- PARTIES ---------------------


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    name: str
    requested: list[RideUnion] = Field(default_factory=list)


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    name: str
    rating: float
    completed: list[RideUnion] = Field(default_factory=list)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    title: str = "Ride Sharing System Demonstration"
    log: LogModel = LogModel()
    validation: ValidationModel = ValidationModel()
    riders: list[RiderModel] = Field(default_factory=list)
    drivers: list[DriverModel] = Field(default_factory=list)
    system_rides: list[RideUnion] = Field(default_factory=list)
