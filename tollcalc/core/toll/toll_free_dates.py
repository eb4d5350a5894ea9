"""Bygger mängden avgiftsfria datum för ett år."""

import datetime
from functools import lru_cache

from tollcalc.core.constants import WEEKEND_WEEKDAYS
from tollcalc.core.holidays import (
    easter_holidays,
    fixed_holidays,
    july_dates,
    midsummer_holidays,
)
from tollcalc.core.validators import validate_year


@lru_cache(maxsize=10)
def get_toll_free_dates(year: int) -> frozenset[datetime.date]:
    """
    Avgiftsfria datum (utöver helger) för ett år.

    - Fasta helgdagar: nyårsdagen, trettondagen, 1 maj, nationaldagen,
      julafton, juldagen, annandag jul, nyårsafton
    - Påsk: långfredag, påskdagen, annandag påsk, Kristi himmelsfärd, pingstdagen
    - Midsommarafton och midsommardagen
    - Hela juli
    """
    validate_year(year)

    dates: set[datetime.date] = set()
    dates.update(fixed_holidays(year))
    dates.update(easter_holidays(year))
    dates.update(midsummer_holidays(year))
    dates.update(july_dates(year))

    return frozenset(dates)


def is_weekend(day: datetime.date) -> bool:
    return day.weekday() in WEEKEND_WEEKDAYS


def is_toll_free_date(day: datetime.date) -> bool:
    """Lördag, söndag eller ett datum i get_toll_free_dates() för dagens år."""
    if isinstance(day, datetime.datetime):
        day = day.date()

    if is_weekend(day):
        return True

    return day in get_toll_free_dates(day.year)
