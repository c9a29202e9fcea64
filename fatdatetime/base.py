"""Exception classes and constants used across ``fatdatetime``."""

from __future__ import annotations

__all__ = [
    'ValidationError',
    'DecodeInvariantError',
    'DOS_YEAR_MIN',
    'DOS_YEAR_MAX',
]


DOS_YEAR_MIN = 1980
DOS_YEAR_MAX = 2107

# DOS time: hhhhhmmm mmmsssss
TIME_HOUR_SHIFT = 11
TIME_HOUR_MASK = 0x1F
TIME_MINUTE_SHIFT = 5
TIME_MINUTE_MASK = 0x3F
TIME_TWO_SECONDS_MASK = 0x1F
HOUR_MAX = 23
MINUTE_MAX = 59
TWO_SECONDS_MAX = 29

# DOS date: yyyyyyym mmmddddd
DATE_YEAR_SHIFT = 9
DATE_YEAR_MASK = 0x7F
DATE_MONTH_SHIFT = 5
DATE_MONTH_MASK = 0x0F
DATE_DAY_MASK = 0x1F
DAY_MAX = 31


class ValidationError(ValueError):
    """Exception raised if a structure -- for example the timestamp fields of a
    directory entry -- cannot be created because the data to be parsed as the
    structure does not conform to the standard of the structure.
    """


class DecodeInvariantError(RuntimeError):
    """Exception raised if a DOS date or time passed every range check but still
    could not be converted to a ``datetime`` value.

    This never happens for any 16-bit input and indicates a bug in this package.
    It is deliberately not a ``ValueError`` so that it is not caught by code
    handling malformed input.
    """
