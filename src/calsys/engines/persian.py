"""
calsys.engines.persian
----------------------
Arithmetic Persian (Solar Hijri) calendar based on the 2820-year grand
cycle. The first six months have 31 days, the next five 30, and Esfand
has 29 days (30 in leap years). Years before AP 1 are not supported.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.types import CalendarSpec
from ._arith import ceil_div, check_day, check_jd, check_month, check_result, check_year

# JDN of 1 Farvardin AP 1
PERSIAN_EPOCH = 1948321
DAYS_PER_CYCLE = 1029983  # 2820 years
CYCLE_YEARS = 2820


def _cycle_year(year: int) -> Tuple[int, int]:
    """Split a year into (base offset from AP 474, year within the grand cycle)."""
    epbase = year - (474 if year >= 0 else 473)
    return epbase, 474 + epbase % CYCLE_YEARS


def _ymd_to_jd(year: int, month: int, day: int) -> int:
    epbase, epyear = _cycle_year(year)
    if month <= 7:
        month_days = (month - 1) * 31
    else:
        month_days = (month - 1) * 30 + 6
    return (
        day
        + month_days
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // CYCLE_YEARS) * DAYS_PER_CYCLE
        + PERSIAN_EPOCH
        - 1
    )


class PersianCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

    def months_in_year(self) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        check_year(self.name, year)
        _, epyear = _cycle_year(year)
        return ((epyear + 38) * 682) % 2816 < 682

    def days_in_month(self, year: int, month: int) -> int:
        check_year(self.name, year)
        check_month(self.name, month, 12)
        if month <= 6:
            return 31
        if month < 12 or self.is_leap_year(year):
            return 30
        return 29

    def days_in_year(self, year: int) -> int:
        check_year(self.name, year)
        return 366 if self.is_leap_year(year) else 365

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 12)
        return self.spec.month_names[month - 1]

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        jd = _ymd_to_jd(year, month, day)
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        depoch = jd - _ymd_to_jd(475, 1, 1)
        cycle, cyear = divmod(depoch, DAYS_PER_CYCLE)
        if cyear == DAYS_PER_CYCLE - 1:
            ycycle = CYCLE_YEARS
        else:
            aux1, aux2 = divmod(cyear, 366)
            ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1
        year = ycycle + CYCLE_YEARS * cycle + 474
        yday = jd - _ymd_to_jd(year, 1, 1) + 1
        if yday <= 186:
            month = ceil_div(yday, 31)
        else:
            month = ceil_div(yday - 6, 30)
        day = jd - _ymd_to_jd(year, month, 1) + 1
        return year, month, day

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 12, "year_zero": False}
