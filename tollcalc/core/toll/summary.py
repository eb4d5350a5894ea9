"""Sammanställning av en dags avgift per passage och intervall."""

import datetime
from collections.abc import Iterable

from tollcalc.core.models import VehicleLike
from tollcalc.core.time_utils import TimeZoneLike
from tollcalc.core.types import DailyFeeSummary, Fee, IntervalCharge, PassageFee

from .daily import apply_daily_cap, bill_day
from .vehicles import get_vehicle_type


def summarize_daily_fee(
    vehicle: VehicleLike | None,
    passages: Iterable[datetime.datetime] | None,
    tz: TimeZoneLike = None,
) -> DailyFeeSummary:
    """
    Bygger en sammanställning av dagens avgift.

    Samma beräkning som calculate_daily_fee(), så summary["total"] är alltid
    lika med calculate_daily_fee() för samma indata.

    Raises:
        InvalidPassagesError: om passagerna ligger på olika kalenderdagar
    """
    billing = bill_day(vehicle, passages, tz)
    raw_total = billing.state.total
    total = apply_daily_cap(raw_total)

    passage_fees: list[PassageFee] = [
        {"time": passage, "fee": Fee(fee)} for passage, fee in billing.priced
    ]
    intervals: list[IntervalCharge] = [
        {
            "start": interval.start,
            "peak_fee": Fee(interval.peak_fee),
            "passages": list(interval.passages),
        }
        for interval in billing.state.intervals
    ]

    return {
        "date": billing.day,
        "vehicle_type": get_vehicle_type(vehicle),
        "passages": passage_fees,
        "intervals": intervals,
        "raw_total": Fee(raw_total),
        "total": Fee(total),
        "capped": total < raw_total,
    }
