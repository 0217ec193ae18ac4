"""
calsys.engines._arith
---------------------
Validation helpers shared by the calendar systems. Each system calls these
explicitly; there is no common base class.
"""

from __future__ import annotations

from numbers import Integral

from ..core.errors import InvalidDateError, OutOfRangeError


def ceil_div(a: int, b: int) -> int:
    return -((-a) // b)


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_year(name: str, year: int) -> None:
    if not _is_int(year):
        raise InvalidDateError(f"{name}: year must be an integer, got {year!r}")


def check_year_nonzero(name: str, year: int) -> None:
    check_year(name, year)
    if year == 0:
        raise InvalidDateError(f"{name}: there is no year zero")


def check_month(name: str, month: int, months: int) -> None:
    if not _is_int(month) or not (1 <= month <= months):
        raise InvalidDateError(f"{name}: month must be in 1..{months}, got {month!r}")


def check_day(name: str, year: int, month: int, day: int, last: int) -> None:
    if not _is_int(day) or not (1 <= day <= last):
        raise InvalidDateError(
            f"{name}: day must be in 1..{last} for {year}-{month:02d}, got {day!r}"
        )


def check_jd(name: str, jd: int, jd_start: int, jd_end: int) -> None:
    if not _is_int(jd):
        raise OutOfRangeError(f"{name}: Julian day must be an integer, got {jd!r}")
    if not (jd_start <= jd <= jd_end):
        raise OutOfRangeError(f"{name}: Julian day {jd} outside {jd_start}..{jd_end}")


def check_result(name: str, ymd: tuple, jd: int, jd_start: int, jd_end: int) -> int:
    """Reject civil dates whose JDN falls outside the supported range."""
    if not (jd_start <= jd <= jd_end):
        y, m, d = ymd
        raise InvalidDateError(
            f"{name}: {y}-{m:02d}-{d:02d} is outside the supported range (JD {jd_start}..{jd_end})"
        )
    return jd
