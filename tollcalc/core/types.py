# tollcalc/core/types.py

"""
Custom type definitions for the toll calculation.

The Fee NewType keeps fees from being mixed up with other ints,
and the TypedDicts describe the breakdown returned by summarize_daily_fee().
"""

from datetime import date, datetime
from typing import NewType, TypedDict

Fee = NewType("Fee", int)

VehicleType = str


class PassageFee(TypedDict):
    """A single passage with its local time and instantaneous fee."""

    time: datetime
    fee: Fee


class IntervalCharge(TypedDict):
    """One billing interval: anchor, the highest fee in it and its passages."""

    start: datetime
    peak_fee: Fee
    passages: list[datetime]


class DailyFeeSummary(TypedDict):
    """Breakdown of one vehicle's fee for one day."""

    date: date | None
    vehicle_type: VehicleType | None
    passages: list[PassageFee]
    intervals: list[IntervalCharge]
    raw_total: Fee
    total: Fee
    capped: bool
