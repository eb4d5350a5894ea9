import calendar
import datetime

from tollcalc.core.constants import (
    DAYS_PER_WEEK,
    EASTER_OFFSETS,
    FRIDAY,
    MIDSUMMER_SEARCH_START,
    TOLL_FREE_MONTH,
)


def easter_sunday(year: int) -> datetime.date:
    """Anonymous Gregorian algorithm."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def midsommarafton(year: int) -> datetime.date:
    """Friday between 19 and 25 June."""
    june_19 = datetime.date(year, *MIDSUMMER_SEARCH_START)
    days_until_friday = (FRIDAY - june_19.weekday() + DAYS_PER_WEEK) % DAYS_PER_WEEK
    return june_19 + datetime.timedelta(days=days_until_friday)


def midsommardagen(year: int) -> datetime.date:
    """Midsummer Day: the Saturday after Midsummer Eve."""
    return midsommarafton(year) + datetime.timedelta(days=1)


def langfredagen(year: int) -> datetime.date:
    """Good Friday (Långfredagen): Friday before Easter Sunday."""
    return easter_sunday(year) - datetime.timedelta(days=2)


def annandagpask(year: int) -> datetime.date:
    """Easter Monday."""
    return easter_sunday(year) + datetime.timedelta(days=1)


def kristi_himmelsfardsdag(year: int) -> datetime.date:
    """Ascension Day: 39 days after Easter Sunday (Thursday)."""
    return easter_sunday(year) + datetime.timedelta(days=39)


def pingstdagen(year: int) -> datetime.date:
    """Whit Sunday: 49 days after Easter Sunday."""
    return easter_sunday(year) + datetime.timedelta(days=49)


def nyarsdagen(year: int) -> datetime.date:
    """New Year's Day: January 1st."""
    return datetime.date(year, 1, 1)


def trettondagen(year: int) -> datetime.date:
    """Epiphany / January 6."""
    return datetime.date(year, 1, 6)


def forsta_maj(year: int) -> datetime.date:
    """May 1st (Labour Day)."""
    return datetime.date(year, 5, 1)


def nationaldagen(year: int) -> datetime.date:
    """Swedish National Day, June 6th."""
    return datetime.date(year, 6, 6)


def julafton(year: int) -> datetime.date:
    """Christmas Eve: December 24th."""
    return datetime.date(year, 12, 24)


def juldagen(year: int) -> datetime.date:
    """Christmas Day: December 25th."""
    return datetime.date(year, 12, 25)


def annandag_jul(year: int) -> datetime.date:
    """Boxing Day: December 26th."""
    return datetime.date(year, 12, 26)


def nyarsafton(year: int) -> datetime.date:
    """New Year's Eve: December 31st."""
    return datetime.date(year, 12, 31)


def fixed_holidays(year: int) -> list[datetime.date]:
    """Helgdagar med samma datum varje år."""
    return [
        nyarsdagen(year),
        trettondagen(year),
        forsta_maj(year),
        nationaldagen(year),
        julafton(year),
        juldagen(year),
        annandag_jul(year),
        nyarsafton(year),
    ]


def easter_holidays(year: int) -> list[datetime.date]:
    """Långfredag, påskdagen, annandag påsk, Kristi himmelsfärd och pingstdagen."""
    sunday = easter_sunday(year)
    return [sunday + datetime.timedelta(days=offset) for offset in EASTER_OFFSETS]


def midsummer_holidays(year: int) -> list[datetime.date]:
    """Midsommarafton och midsommardagen."""
    return [midsommarafton(year), midsommardagen(year)]


def july_dates(year: int) -> list[datetime.date]:
    """Alla dagar i juli."""
    _, days_in_month = calendar.monthrange(year, TOLL_FREE_MONTH)
    return [datetime.date(year, TOLL_FREE_MONTH, day) for day in range(1, days_in_month + 1)]
