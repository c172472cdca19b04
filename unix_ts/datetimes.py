"""Conversions between Timestamp and the standard library datetime types.

datetime resolves microseconds, so conversions to it floor the remaining
nanoseconds. Conversions from it are exact.
"""
from datetime import datetime, timedelta, timezone, tzinfo
import logging
from zoneinfo import ZoneInfo

from .exceptions import CalendarRangeError
from .timestamp import Timestamp
from .utils import NANOS_PER_MICRO

log = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_utc_datetime(timestamp: Timestamp) -> datetime:
    """Convert the timestamp into an aware datetime in UTC.

    Raises:
        CalendarRangeError: If the timestamp falls outside years 1 to 9999.
    """
    micros, rest = divmod(timestamp.nanos, NANOS_PER_MICRO)
    if rest:
        log.debug("Flooring %r to microsecond resolution", timestamp)
    try:
        return EPOCH + timedelta(seconds=timestamp.seconds, microseconds=micros)
    except OverflowError as e:
        raise CalendarRangeError(timestamp) from e


def to_datetime(timestamp: Timestamp, tz) -> datetime:
    """Convert the timestamp into an aware datetime in the given time zone.

    ``tz`` is a tzinfo instance or an IANA zone name such as
    ``"America/New_York"``.
    """
    if isinstance(tz, str):
        tz = ZoneInfo(tz)
    elif not isinstance(tz, tzinfo):
        raise TypeError('Expected a tzinfo or zone name, not %s' % type(tz).__name__)
    utc = to_utc_datetime(timestamp)
    try:
        return utc.astimezone(tz)
    except (OverflowError, ValueError) as e:
        raise CalendarRangeError(timestamp) from e


def to_naive_datetime(timestamp: Timestamp) -> datetime:
    """Convert the timestamp into a naive datetime in UTC."""
    return to_utc_datetime(timestamp).replace(tzinfo=None)


def from_datetime(dt: datetime) -> Timestamp:
    """Convert a datetime into a Timestamp. Naive datetimes are taken as UTC."""
    if not isinstance(dt, datetime):
        raise TypeError('Expected a datetime, not %s' % type(dt).__name__)
    if dt.utcoffset() is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return Timestamp.from_duration(dt - EPOCH)
