"""Avgift för en enskild passage."""

import datetime
from typing import Final

from tollcalc.core.config import NO_FEE
from tollcalc.core.models import FeeBand, VehicleLike
from tollcalc.core.time_utils import TimeZoneLike, resolve_timezone, to_local

from .toll_free_dates import is_toll_free_date
from .vehicles import is_toll_free_vehicle

#: Tidsband enligt gällande taxa. Start och slut ingår båda (minutupplösning).
FEE_BANDS: Final[tuple[FeeBand, ...]] = tuple(
    FeeBand(start_time=start, end_time=end, fee=fee)
    for start, end, fee in (
        ("06:00", "06:29", 8),
        ("06:30", "06:59", 13),
        ("07:00", "07:59", 18),
        ("08:00", "08:29", 13),
        ("08:30", "14:59", 8),
        ("15:00", "15:29", 13),
        ("15:30", "16:59", 18),
        ("17:00", "17:59", 13),
        ("18:00", "18:29", 8),
    )
)


def fee_for_time(time_of_day: datetime.time) -> int:
    """Avgift enligt tidsbanden, utan hänsyn till datum eller fordon."""
    for band in FEE_BANDS:
        if band.contains(time_of_day):
            return band.fee
    return NO_FEE


def local_passage_fee(local_instant: datetime.datetime, vehicle: VehicleLike | None) -> int:
    """Avgift för en passage som redan är omräknad till lokal tid."""
    if is_toll_free_date(local_instant.date()) or is_toll_free_vehicle(vehicle):
        return NO_FEE
    return fee_for_time(local_instant.time())


def calculate_passage_fee(
    instant: datetime.datetime,
    vehicle: VehicleLike | None,
    tz: TimeZoneLike = None,
) -> int:
    """
    Avgift för en enskild passage.

    Args:
        instant: Passagens tidpunkt. Naiv tid tolkas som lokal tid i tz.
        vehicle: Fordon med attributet type, eller None
        tz: Tidszon (tzinfo eller IANA-namn). None ger config.DEFAULT_TIMEZONE.

    Returns:
        0, 8, 13 eller 18
    """
    zone = resolve_timezone(tz)
    return local_passage_fee(to_local(instant, zone), vehicle)
