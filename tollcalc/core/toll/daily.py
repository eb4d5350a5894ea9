"""Dagsavgift: passager slås ihop till debiteringsintervall."""

import datetime
import logging
from collections.abc import Iterable
from functools import reduce
from typing import NamedTuple

from tollcalc.core.config import BILLING_INTERVAL_MINUTES, DAILY_MAX_FEE
from tollcalc.core.models import VehicleLike
from tollcalc.core.time_utils import TimeZoneLike, elapsed_since, resolve_timezone, to_local
from tollcalc.core.validators import validate_same_day

from .fees import local_passage_fee
from .vehicles import get_vehicle_type

logger = logging.getLogger(__name__)

BILLING_INTERVAL = datetime.timedelta(minutes=BILLING_INTERVAL_MINUTES)


class BillingInterval(NamedTuple):
    """Ett intervall, förankrat i sin första passage."""

    start: datetime.datetime
    peak_fee: int
    passages: tuple[datetime.datetime, ...]


class BillingState(NamedTuple):
    """Ackumulator för vikningen över dagens passager."""

    total: int = 0
    interval_start: datetime.datetime | None = None
    interval_peak_fee: int = 0
    intervals: tuple[BillingInterval, ...] = ()


class DailyBilling(NamedTuple):
    """Resultat av bill_day(): lokal dag, prissatta passager och slutligt tillstånd."""

    day: datetime.date | None
    priced: list[tuple[datetime.datetime, int]]
    state: BillingState


def calculate_daily_fee(
    vehicle: VehicleLike | None,
    passages: Iterable[datetime.datetime] | None,
    tz: TimeZoneLike = None,
) -> int:
    """
    Räknar ett fordons totala avgift för en dag.

    Args:
        vehicle: Fordon med attributet type, eller None (räknas som avgiftspliktigt)
        passages: Passagernas tidpunkter, i valfri ordning
        tz: Tidszon för lokalt datum och klockslag. None ger config.DEFAULT_TIMEZONE.

    Returns:
        Total avgift, högst DAILY_MAX_FEE

    Raises:
        InvalidPassagesError: om passagerna ligger på olika kalenderdagar
    """
    billing = bill_day(vehicle, passages, tz)
    return apply_daily_cap(billing.state.total)


def bill_day(
    vehicle: VehicleLike | None,
    passages: Iterable[datetime.datetime] | None,
    tz: TimeZoneLike = None,
) -> DailyBilling:
    """Sorterar, validerar och prissätter passagerna och viker dem till intervall."""
    if not passages:
        return DailyBilling(day=None, priced=[], state=BillingState())

    zone = resolve_timezone(tz)
    local_passages = sorted((to_local(passage, zone) for passage in passages), key=_utc_key)
    if not local_passages:
        return DailyBilling(day=None, priced=[], state=BillingState())

    day = validate_same_day(local_passages)

    priced = [(passage, local_passage_fee(passage, vehicle)) for passage in local_passages]
    state = reduce(_bill_passage, priced, BillingState())

    logger.debug(
        "Billed %d passages in %d intervals, raw total %d",
        len(priced),
        len(state.intervals),
        state.total,
        extra={"vehicle_type": get_vehicle_type(vehicle), "passage_count": len(priced), "day": day},
    )
    return DailyBilling(day=day, priced=priced, state=state)


def apply_daily_cap(total: int) -> int:
    """Begränsar dagens summa till DAILY_MAX_FEE."""
    if total > DAILY_MAX_FEE:
        logger.debug("Daily total %d capped at %d", total, DAILY_MAX_FEE)
        return DAILY_MAX_FEE
    return total


# === Privata hjälpfunktioner ===


def _utc_key(passage: datetime.datetime) -> datetime.datetime:
    # Same-zone comparison ignores the UTC offset, which breaks order during the DST fold
    return passage.astimezone(datetime.timezone.utc)


def _bill_passage(state: BillingState, priced: tuple[datetime.datetime, int]) -> BillingState:
    """
    Ett steg i vikningen.

    Inom BILLING_INTERVAL från intervallets start debiteras bara mellanskillnaden
    när en ny högsta avgift hittas. Annars öppnas ett nytt intervall med
    passagen som ankare.
    """
    passage, fee = priced

    if state.interval_start is None or elapsed_since(state.interval_start, passage) > BILLING_INTERVAL:
        return _open_interval(state, passage, fee)

    current = state.intervals[-1]
    total = state.total
    peak = state.interval_peak_fee

    if fee > peak:
        total += fee - peak
        peak = fee

    current = current._replace(peak_fee=peak, passages=current.passages + (passage,))
    return state._replace(
        total=total,
        interval_peak_fee=peak,
        intervals=state.intervals[:-1] + (current,),
    )


def _open_interval(state: BillingState, passage: datetime.datetime, fee: int) -> BillingState:
    """Stänger nuvarande intervall och startar ett nytt förankrat i passagen."""
    logger.debug("Opening billing interval at %s with fee %d", passage.isoformat(), fee)
    interval = BillingInterval(start=passage, peak_fee=fee, passages=(passage,))
    return BillingState(
        total=state.total + fee,
        interval_start=passage,
        interval_peak_fee=fee,
        intervals=state.intervals + (interval,),
    )
