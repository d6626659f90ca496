# habitforecast/helpers/_date.py

# SECTION: MODULE DOCSTRING
"""Date/time helpers for Habitica timestamps.

Habitica sends ISO 8601 strings (usually with a trailing 'Z'); older exports
may carry epoch numbers. Everything is normalised to aware UTC datetimes.
Requires `python-dateutil`.
"""

# SECTION: IMPORTS
from datetime import datetime, time, timezone, tzinfo
from typing import Any

import dateutil.parser
from dateutil import tz as dateutil_tz

from ._logger import log

# Epoch values above this are taken as milliseconds
_EPOCH_MS_THRESHOLD = 2e9


# FUNC: to_utc
def to_utc(timestamp: Any) -> datetime | None:
    """Converts a timestamp to a timezone-aware datetime in UTC.

    Accepts ISO 8601 strings, epoch seconds or milliseconds, and datetimes.
    Naive values are assumed to be UTC.

    Returns:
        An aware UTC datetime, or None for None/empty input.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp.
    """
    if timestamp is None or (isinstance(timestamp, str) and not timestamp.strip()):
        return None

    if isinstance(timestamp, datetime):
        dt = timestamp
    elif isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool):
        seconds = timestamp / 1000.0 if abs(timestamp) > _EPOCH_MS_THRESHOLD else float(timestamp)
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    elif isinstance(timestamp, str):
        try:
            dt = dateutil.parser.isoparse(timestamp)
        except (ValueError, OverflowError) as e:
            log.warning(f"Could not parse timestamp {timestamp!r}: {e}")
            raise ValueError(f"Invalid timestamp: {timestamp!r}") from e
    else:
        raise ValueError(f"Unsupported timestamp type: {type(timestamp).__name__}")

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


# FUNC: resolve_timezone
def resolve_timezone(name: str | None = None) -> tzinfo:
    """Returns the named IANA zone, or the system local zone when name is None."""
    if name is None:
        return dateutil_tz.tzlocal()
    zone = dateutil_tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {name!r}")
    return zone


# FUNC: end_of_day
def end_of_day(now: datetime | None = None, zone: tzinfo | None = None) -> datetime:
    """Last instant (23:59:59.999999) of the calendar day containing `now` in `zone`.

    Args:
        now: Reference instant; defaults to the current time. Naive values are UTC.
        zone: Calendar zone; defaults to the system local zone.
    """
    zone = zone or dateutil_tz.tzlocal()
    reference = to_utc(now) if now is not None else datetime.now(timezone.utc)
    local = reference.astimezone(zone)
    return datetime.combine(local.date(), time.max, tzinfo=zone)
