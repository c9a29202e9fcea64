"""Decoding of packed DOS dates and times as found in FAT directory entries.

Bit layout of a DOS time, most significant bit first::

    15..11  hours, 0-23
    10..5   minutes, 0-59
     4..0   two-second count, 0-29 (0-58 seconds)

Bit layout of a DOS date, most significant bit first::

    15..9   count of years since 1980, 0-127 (1980-2107)
     8..5   month of year, 1-12
     4..0   day of month, 1-31

Both fields are stored little-endian on disk. The functions in this module expect
the already assembled 16-bit value.

See https://en.wikipedia.org/wiki/Design_of_the_FAT_file_system#DIR_OFS_0Eh.
"""

from __future__ import annotations

from datetime import date, datetime, time

from .base import (
    DATE_DAY_MASK,
    DATE_MONTH_MASK,
    DATE_MONTH_SHIFT,
    DATE_YEAR_MASK,
    DATE_YEAR_SHIFT,
    DAY_MAX,
    DOS_YEAR_MIN,
    HOUR_MAX,
    MINUTE_MAX,
    TIME_HOUR_MASK,
    TIME_HOUR_SHIFT,
    TIME_MINUTE_MASK,
    TIME_MINUTE_SHIFT,
    TIME_TWO_SECONDS_MASK,
    TWO_SECONDS_MAX,
    DecodeInvariantError,
)

__all__ = [
    'parse_fat_time',
    'parse_fat_date',
    'parse_fat_datetime',
    'is_leap_year',
    'days_in_month',
]


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of ``month`` (1-12) in ``year``.

    ``ValueError`` is raised if ``month`` is not within 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f'Invalid month {month}')
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def parse_fat_time(dos_time: int) -> time | None:
    """Return a ``time`` object from the packed DOS time ``dos_time`` or ``None`` if
    ``dos_time`` does not represent a valid DOS time.

    A value of zero is midnight. Some utilities do not write a time at all, but
    treating zero as reserved is left to the caller.

    >>> parse_fat_time(0xBF7D)
    datetime.time(23, 59, 58)
    >>> parse_fat_time(0xBF7E) is None
    True
    """
    hours = (dos_time >> TIME_HOUR_SHIFT) & TIME_HOUR_MASK
    if hours > HOUR_MAX:
        return None
    minutes = (dos_time >> TIME_MINUTE_SHIFT) & TIME_MINUTE_MASK
    if minutes > MINUTE_MAX:
        return None
    two_seconds = dos_time & TIME_TWO_SECONDS_MASK
    if two_seconds > TWO_SECONDS_MAX:
        return None

    try:
        return time(hours, minutes, two_seconds * 2)
    except ValueError as e:
        raise DecodeInvariantError(f"Couldn't parse DOS time {dos_time:#06x}") from e


def parse_fat_date(dos_date: int) -> date | None:
    """Return a ``date`` object from the packed DOS date ``dos_date`` or ``None`` if
    ``dos_date`` does not represent a valid DOS date.

    A value of zero is treated as a reserved field and yields ``None``.

    >>> parse_fat_date(0xFF9F)
    datetime.date(2107, 12, 31)
    >>> parse_fat_date(0) is None
    True
    """
    # Some utilities do not write a date
    if dos_date == 0:
        return None

    year = ((dos_date >> DATE_YEAR_SHIFT) & DATE_YEAR_MASK) + DOS_YEAR_MIN
    month = (dos_date >> DATE_MONTH_SHIFT) & DATE_MONTH_MASK
    if month < 1 or month > 12:
        return None
    day = dos_date & DATE_DAY_MASK
    if day < 1 or day > DAY_MAX:
        return None
    if day > days_in_month(year, month):
        return None

    try:
        return date(year, month, day)
    except ValueError as e:
        raise DecodeInvariantError(f"Couldn't parse DOS date {dos_date:#06x}") from e


def parse_fat_datetime(dos_date: int, dos_time: int = 0) -> datetime | None:
    """Return a naive ``datetime`` object from the packed DOS date ``dos_date`` and
    the packed DOS time ``dos_time`` or ``None`` if either of them is invalid.

    ``dos_time`` defaults to midnight because some directory entry fields, like the
    date of last access, come without a time.
    """
    date_ = parse_fat_date(dos_date)
    if date_ is None:
        return None
    time_ = parse_fat_time(dos_time)
    if time_ is None:
        return None
    return datetime.combine(date_, time_)
