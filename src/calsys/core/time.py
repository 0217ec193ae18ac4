from __future__ import annotations
from datetime import date

from .errors import OutOfRangeError

# JDN of 1970-01-01
JD_UNIX_EPOCH = 2440588
SECONDS_PER_DAY = 86400

# date.min / date.max as JDN
_JD_DATE_MIN = 1721426
_JD_DATE_MAX = 5373484


def to_jdn(d: date) -> int:
    """Convert a (proleptic Gregorian) datetime.date to its Julian Day Number."""
    # date.toordinal() is 1 for 0001-01-01
    return d.toordinal() + _JD_DATE_MIN - 1

def from_jdn(jdn: int) -> date:
    """Inverse of to_jdn, limited to the years datetime.date can represent."""
    if not (_JD_DATE_MIN <= jdn <= _JD_DATE_MAX):
        raise OutOfRangeError(f"JDN {jdn} is outside datetime.date range")
    return date.fromordinal(jdn - _JD_DATE_MIN + 1)

def day_of_week(jdn: int) -> int:
    """0=Sunday .. 6=Saturday."""
    return (jdn + 1) % 7

def jd_to_unix(jdn: int) -> int:
    """Unix timestamp of midnight UTC at the start of the given day."""
    if jdn < JD_UNIX_EPOCH:
        raise OutOfRangeError(f"JDN {jdn} is before the Unix epoch")
    return (jdn - JD_UNIX_EPOCH) * SECONDS_PER_DAY

def unix_to_jd(timestamp: int | float) -> int:
    """JDN of the UTC day containing the timestamp."""
    if timestamp < 0:
        raise OutOfRangeError(f"Timestamp {timestamp} is before the Unix epoch")
    return JD_UNIX_EPOCH + int(timestamp) // SECONDS_PER_DAY
