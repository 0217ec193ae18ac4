"""
calsys.engines.arabic
---------------------
Tabular Islamic (Hijri) calendar with the civil epoch, 1 Muharram AH 1 =
16 July 622 (Julian). Odd months have 30 days, even months 29, and
Dhu al-Hijjah gains a day in the 11 leap years of each 30-year cycle.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.types import CalendarSpec
from ._arith import ceil_div, check_day, check_jd, check_month, check_result, check_year

# JDN of 1 Muharram AH 1
ARABIC_EPOCH = 1948440
DAYS_PER_30_YEARS = 10631


def _ymd_to_jd(year: int, month: int, day: int) -> int:
    # ceil(29.5 * (month - 1)) == ceil(59 * (month - 1) / 2)
    return (
        day
        + ceil_div(59 * (month - 1), 2)
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + ARABIC_EPOCH
        - 1
    )


class ArabicCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

    def months_in_year(self) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        check_year(self.name, year)
        return (11 * year + 14) % 30 < 11

    def days_in_month(self, year: int, month: int) -> int:
        check_year(self.name, year)
        check_month(self.name, month, 12)
        if month == 12 and self.is_leap_year(year):
            return 30
        return 30 if month % 2 == 1 else 29

    def days_in_year(self, year: int) -> int:
        check_year(self.name, year)
        return 355 if self.is_leap_year(year) else 354

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 12)
        return self.spec.month_names[month - 1]

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        jd = _ymd_to_jd(year, month, day)
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        year = (30 * (jd - ARABIC_EPOCH) + 10646) // DAYS_PER_30_YEARS
        # months alternate 30/29, i.e. 29.5 days on average
        month = min(12, ceil_div(2 * (jd - 29 - _ymd_to_jd(year, 1, 1)), 59) + 1)
        day = jd - _ymd_to_jd(year, month, 1) + 1
        return year, month, day

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 12, "year_zero": False}
