import datetime
from typing import Protocol

from pydantic import BaseModel, field_validator, model_validator

from tollcalc.core.config import DEFAULT_TIMEZONE
from tollcalc.core.time_utils import parse_hm, resolve_timezone


class VehicleLike(Protocol):
    """Anything exposing a vehicle type classifier."""

    type: str


class Vehicle(BaseModel):
    """Vehicle with the type classifier used for toll exemptions."""
    type: str

    @classmethod
    def car(cls) -> "Vehicle":
        return cls(type="Car")

    @classmethod
    def motorbike(cls) -> "Vehicle":
        return cls(type="Motorbike")


class FeeBand(BaseModel):
    """Time-of-day fee band, inclusive at both ends (minute resolution)."""
    start_time: datetime.time
    end_time: datetime.time
    fee: int

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_time(cls, value):
        return parse_hm(value)

    @model_validator(mode="after")
    def check_order(self):
        if self.end_time < self.start_time:
            raise ValueError(f"Band ends before it starts: {self.start_time}-{self.end_time}")
        return self

    def contains(self, time_of_day: datetime.time) -> bool:
        minute = time_of_day.replace(second=0, microsecond=0, tzinfo=None)
        return self.start_time <= minute <= self.end_time


class Settings(BaseModel):
    """Application settings and configuration."""
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        resolve_timezone(value)
        return value

    def zone(self) -> datetime.tzinfo:
        return resolve_timezone(self.timezone)
