import time
from datetime import datetime, timedelta, timezone, date
from typing import Optional, Union

import dateutil.parser as date_parser

EpochMilliseconds = int

MILLIS_PER_DAY = 24 * 60 * 60 * 1000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def millis_to_timestamp(millis: int) -> Optional[datetime]:
    if millis is None:
        return None
    seconds = millis // 1000
    ds = datetime.fromtimestamp(seconds, tz=timezone.utc)

    millis = millis % 1000
    if millis != 0:
        ds += timedelta(milliseconds=millis)
    return ds


def get_system_time_in_millis() -> EpochMilliseconds:
    return time.time_ns() // 1000000


def now() -> datetime:
    """
    The current time as a UTC timestamp.
    """
    return millis_to_timestamp(get_system_time_in_millis())


def days_from_now(days: int) -> datetime:
    return millis_to_timestamp(get_system_time_in_millis() + days * MILLIS_PER_DAY)


def to_epoch_millis(value: Union[datetime, date]) -> EpochMilliseconds:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def parse_date(string: Optional[str]) -> Optional[datetime]:
    """
    Parses a calendar date (i.e. 2024-03-01).

    Dates without a zone are taken to be UTC midnight.

    :param string: the date string.
    :return: the timestamp, or None if the string is None or blank.
    :raises ValueError: if the string is not a valid date.
    """
    if string is None or len(string.strip()) == 0:
        return None
    try:
        ts = date_parser.isoparse(string.strip())
    except ValueError:
        ts = date_parser.parse(string.strip())
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def to_datetime(value: Union[datetime, EpochMilliseconds, None]) -> Optional[datetime]:
    """
    Normalizes a stored timestamp, which is either a datetime or epoch milliseconds, to a datetime.
    """
    if value is None or isinstance(value, datetime):
        return value
    return millis_to_timestamp(int(value))
