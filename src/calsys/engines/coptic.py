"""
calsys.engines.coptic
---------------------
Coptic calendar, Era of the Martyrs. Twelve 30-day months followed by the
5 or 6 epagomenal days of Pi Kogi Enavot (month 13).
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.types import CalendarSpec
from ._arith import check_day, check_jd, check_month, check_result, check_year

# JDN of 1 Thout AM 1 (29 August 284, Julian)
COPTIC_EPOCH = 1825030


def _ymd_to_jd(year: int, month: int, day: int) -> int:
    return COPTIC_EPOCH - 1 + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day


class CopticCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

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
        return 30

    def days_in_year(self, year: int) -> int:
        check_year(self.name, year)
        return 366 if self.is_leap_year(year) else 365

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 13)
        return self.spec.month_names[month - 1]

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        jd = _ymd_to_jd(year, month, day)
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        year = (4 * (jd - COPTIC_EPOCH) + 1463) // 1461
        month = (jd - _ymd_to_jd(year, 1, 1)) // 30 + 1
        day = jd + 1 - _ymd_to_jd(year, month, 1)
        return year, month, day

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 13, "year_zero": False}
