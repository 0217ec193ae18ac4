"""
calsys.engines.julian
---------------------
Proleptic Julian calendar. Same year numbering as the Gregorian engine
(no year zero), but every fourth year is a leap year.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarSpec
from ._arith import check_day, check_jd, check_month, check_result, check_year_nonzero

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class JulianCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

    def months_in_year(self) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        check_year_nonzero(self.name, year)
        # 1 BC, 5 BC, ... are leap years
        if year < 0:
            return (year + 1) % 4 == 0
        return year % 4 == 0

    def days_in_month(self, year: int, month: int) -> int:
        check_year_nonzero(self.name, year)
        check_month(self.name, month, 12)
        if month == 2 and self.is_leap_year(year):
            return 29
        return _MONTH_DAYS[month - 1]

    def days_in_year(self, year: int) -> int:
        check_year_nonzero(self.name, year)
        return 366 if self.is_leap_year(year) else 365

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 12)
        return self.spec.month_names[month - 1]

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        a = (14 - month) // 12
        y = (year + 1 if year < 0 else year) + 4800 - a
        m = month + 12 * a - 3
        jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        c = jd + 32082
        d = (4 * c + 3) // 1461
        e = c - (1461 * d) // 4
        m = (5 * e + 2) // 153
        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = d - 4800 + (m // 10)
        if year <= 0:
            year -= 1
        return year, month, day

    def easter_days(self, year: int) -> int:
        """Days from 21 March (Julian) to Easter Sunday, Julian computus."""
        if year < 1:
            raise InvalidDateError(f"{self.name}: Easter is only defined for years >= 1, got {year}")
        a, b, c = year % 4, year % 7, year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        n = d + e + 114
        month, day = n // 31, n % 31 + 1
        return day - 21 if month == 3 else day + 10

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 12, "year_zero": False}
