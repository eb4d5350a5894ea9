import datetime
import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class TollCalculationError(Exception):
    """Base error for problems computing a toll fee."""

    pass


class InvalidPassagesError(TollCalculationError, ValueError):
    """Passages handed to one daily calculation span more than one calendar day."""

    pass


class TimeZoneError(TollCalculationError, ValueError):
    """Unknown or unusable time zone."""

    pass


def validate_same_day(passages: Sequence[datetime.datetime]) -> datetime.date | None:
    """
    Säkerställ att alla passager ligger på samma kalenderdag.

    Passagerna ska redan vara sorterade och omräknade till lokal tid.
    Returnerar dagen, eller None för en tom lista.

    Raises:
        InvalidPassagesError: om någon passage ligger på en annan dag än den första
    """
    if not passages:
        return None

    first_day = passages[0].date()
    for passage in passages:
        if passage.date() != first_day:
            logger.error(
                "Passages span more than one day. first=%s offending=%s count=%d",
                passages[0].isoformat(),
                passage.isoformat(),
                len(passages),
            )
            raise InvalidPassagesError(
                f"All passages must be on the same day: {first_day.isoformat()} != {passage.date().isoformat()}"
            )
    return first_day


def validate_year(year: int) -> int:
    """
    Validerar att året går att representera som datetime.date.

    Ogiltiga år är ett programmeringsfel och ger ValueError.
    """
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        raise ValueError(f"Year out of range: {year}")
    return year
