"""
calsys.engines.french
---------------------
French Republican calendar, arithmetic form: twelve 30-day months followed
by 5 or 6 complementary days (month 13). Years 3, 7, 11, ... are leap
years (sextile). Only the years the calendar was in civil use are
accepted by default (An I .. An XIV); see the ``max_year`` option.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarSpec
from ._arith import check_day, check_jd, check_month, check_result, check_year

# JDN of 1 Vendemiaire An I is FRENCH_OFFSET + 366
FRENCH_OFFSET = 2375474
DAYS_PER_4_YEARS = 1461
DAYS_PER_MONTH = 30


def _ymd_to_jd(year: int, month: int, day: int) -> int:
    return (year * DAYS_PER_4_YEARS) // 4 + (month - 1) * DAYS_PER_MONTH + day + FRENCH_OFFSET


class FrenchCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.max_year = int(spec.option("max_year", 14))
        if self.max_year < 1:
            raise ValueError("max_year must be >= 1")
        self.jd_start = max(spec.jd_start, _ymd_to_jd(1, 1, 1))
        self.jd_end = min(spec.jd_end, _ymd_to_jd(self.max_year + 1, 1, 1) - 1)

    def months_in_year(self) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        check_year(self.name, year)
        return year % 4 == 3

    def days_in_month(self, year: int, month: int) -> int:
        check_year(self.name, year)
        check_month(self.name, month, 13)
        if month == 13:
            return 6 if self.is_leap_year(year) else 5
        return DAYS_PER_MONTH

    def days_in_year(self, year: int) -> int:
        check_year(self.name, year)
        return 366 if self.is_leap_year(year) else 365

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 13)
        return self.spec.month_names[month - 1]

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_year(self.name, year)
        if not (1 <= year <= self.max_year):
            raise InvalidDateError(f"{self.name}: year must be in 1..{self.max_year}, got {year}")
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        jd = _ymd_to_jd(year, month, day)
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        temp = (jd - FRENCH_OFFSET) * 4 - 1
        year, rem = divmod(temp, DAYS_PER_4_YEARS)
        day_of_year = rem // 4
        month, day = divmod(day_of_year, DAYS_PER_MONTH)
        return year, month + 1, day + 1

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 13, "year_zero": False,
                "max_year": self.max_year}
