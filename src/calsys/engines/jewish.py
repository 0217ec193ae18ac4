"""
calsys.engines.jewish
---------------------
Arithmetic Hebrew calendar (Anno Mundi).

Months use fixed slots 1..13 counted from Tishri:
  1 Tishri, 2 Heshvan, 3 Kislev, 4 Tevet, 5 Shevat, 6 Adar I, 7 Adar II,
  8 Nisan, 9 Iyyar, 10 Sivan, 11 Tammuz, 12 Av, 13 Elul.
Slot 6 only exists in leap years; in a common year slot 7 is plain "Adar".

New year is the molad of Tishri in parts (1 day = 25920 parts) with the
postponement rules folded into _elapsed_days and _year_length_correction.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarSpec
from ._arith import check_day, check_jd, check_month, check_result, check_year

# JDN of 1 Tishri AM 1
JEWISH_EPOCH = 347998

PARTS_PER_DAY = 25920
# Fractional day of the first molad and of a mean month, in parts
MOLAD_BASE = 12084
MONTH_PARTS = 13753  # 12h 793p

ADAR_I = 6
ADAR_II = 7


def _elapsed_days(year: int) -> int:
    months = (235 * year - 234) // 19
    parts = MOLAD_BASE + MONTH_PARTS * months
    day = 29 * months + parts // PARTS_PER_DAY
    # lo ADU rosh: Sunday, Wednesday, Friday
    if (3 * (day + 1)) % 7 < 3:
        return day + 1
    return day


def _year_length_correction(year: int) -> int:
    ny0 = _elapsed_days(year - 1)
    ny1 = _elapsed_days(year)
    ny2 = _elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


def new_year(year: int) -> int:
    """JDN of 1 Tishri of the given year."""
    return JEWISH_EPOCH + _elapsed_days(year) + _year_length_correction(year)


class JewishCalendar:
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

    def months_in_year(self) -> int:
        return 13

    def is_leap_year(self, year: int) -> bool:
        check_year(self.name, year)
        return (7 * year + 1) % 19 < 7

    def days_in_year(self, year: int) -> int:
        check_year(self.name, year)
        return new_year(year + 1) - new_year(year)

    def _month_lengths(self, year: int) -> Tuple[int, ...]:
        """Lengths of slots 1..13; 0 marks a slot absent in this year."""
        n = self.days_in_year(year)
        heshvan = 30 if n in (355, 385) else 29
        kislev = 29 if n in (353, 383) else 30
        adar_i = 30 if self.is_leap_year(year) else 0
        return (30, heshvan, kislev, 29, 30, adar_i, 29, 30, 29, 30, 29, 30, 29)

    def days_in_month(self, year: int, month: int) -> int:
        check_year(self.name, year)
        check_month(self.name, month, 13)
        days = self._month_lengths(year)[month - 1]
        if days == 0:
            raise InvalidDateError(f"{self.name}: year {year} is not a leap year and has no Adar I")
        return days

    def month_name(self, year: int, month: int) -> str:
        check_month(self.name, month, 13)
        if month == ADAR_II and not self.is_leap_year(year):
            return self.spec.option("common_adar_name", "Adar")
        return self.spec.month_names[month - 1]

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        before = sum(self._month_lengths(year)[: month - 1])
        jd = new_year(year) + before + day - 1
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        # 35975351/98496 is the mean year length in days
        year = ((jd - JEWISH_EPOCH) * 98496) // 35975351 + 1
        # new years drift up to about a month either side of the mean
        if new_year(year) > jd:
            year -= 1
        elif new_year(year + 1) <= jd:
            year += 1
        remaining = jd - new_year(year)
        lengths = self._month_lengths(year)
        for month, days in enumerate(lengths[:-1], start=1):
            if remaining < days:
                return year, month, remaining + 1
            remaining -= days
        # Elul closes the year
        return year, len(lengths), remaining + 1

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 13, "year_zero": False}
