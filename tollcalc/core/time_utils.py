import datetime
import logging
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tollcalc.core.config import DEFAULT_TIMEZONE, TIME_FORMAT_HM
from tollcalc.core.validators import TimeZoneError

logger = logging.getLogger(__name__)

TimeZoneLike = datetime.tzinfo | str | None


def resolve_timezone(tz: TimeZoneLike) -> datetime.tzinfo:
    """Resolve tz to a tzinfo.

    Handles:
    1) None -> DEFAULT_TIMEZONE
    2) IANA zone names such as "Europe/Stockholm"
    3) tzinfo objects (returned as-is)
    """
    if tz is None:
        tz = DEFAULT_TIMEZONE

    if isinstance(tz, datetime.tzinfo):
        return tz

    if isinstance(tz, str):
        name = tz.strip()
        if not name:
            logger.error("Time zone name is empty string.")
            raise TimeZoneError("Time zone name is empty")
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.exception("Failed resolving time zone. value=%r", tz)
            raise TimeZoneError(f"Unknown time zone: {tz!r}") from e

    logger.error("Unsupported time zone type. type=%s value=%r", type(tz).__name__, tz)
    raise TimeZoneError(f"Unsupported time zone type: {type(tz).__name__}")


def to_local(instant: datetime.datetime, tz: datetime.tzinfo) -> datetime.datetime:
    """Return instant as an aware datetime in tz.

    Naive datetimes are taken to be wall-clock time in tz already.
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=tz)
    return instant.astimezone(tz)


def elapsed_since(start: datetime.datetime, end: datetime.datetime) -> datetime.timedelta:
    """Real elapsed time between two aware datetimes (computed in UTC)."""
    return end.astimezone(datetime.timezone.utc) - start.astimezone(datetime.timezone.utc)


def parse_hm(value: Any) -> datetime.time:
    """Parse "HH:MM" (or pass through a datetime.time)."""
    if isinstance(value, datetime.time):
        return value

    if isinstance(value, str):
        s = value.strip()
        try:
            return datetime.datetime.strptime(s, TIME_FORMAT_HM).time()
        except ValueError as e:
            logger.exception("Failed parsing time string. value=%r", value)
            raise ValueError(f"Invalid time format: {value!r}") from e

    raise ValueError(f"Unsupported time type: {type(value).__name__}")
