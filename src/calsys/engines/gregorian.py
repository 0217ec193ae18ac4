"""
calsys.engines.gregorian
------------------------
Proleptic Gregorian calendar (Fliegel-Van Flandern arithmetic).

Years use the historical numbering: 1 BC is year -1 and there is no year 0.
Internally everything is done on the astronomical year a = y + 1 (y < 0).
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.errors import InvalidDateError
from ..core.types import CalendarSpec
from ._arith import check_day, check_jd, check_month, check_result, check_year_nonzero

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _astro_year(year: int) -> int:
    return year + 1 if year < 0 else year


def _historical_year(a: int) -> int:
    return a - 1 if a <= 0 else a


class GregorianCalendar:
    """
    Fully implements CalendarProtocol.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.name = spec.name
        self.jd_start = spec.jd_start
        self.jd_end = spec.jd_end

    def months_in_year(self) -> int:
        return 12

    def is_leap_year(self, year: int) -> bool:
        check_year_nonzero(self.name, year)
        a = _astro_year(year)
        return a % 4 == 0 and (a % 100 != 0 or a % 400 == 0)

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

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def ymd_to_jd(self, year: int, month: int, day: int) -> int:
        check_day(self.name, year, month, day, self.days_in_month(year, month))
        a = (14 - month) // 12
        y = _astro_year(year) + 4800 - a
        m = month + 12 * a - 3
        jd = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
        return check_result(self.name, (year, month, day), jd, self.jd_start, self.jd_end)

    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]:
        check_jd(self.name, jd, self.jd_start, self.jd_end)
        a = jd + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
        d = (4 * c + 3) // 1461
        e = c - (1461 * d) // 4
        m = (5 * e + 2) // 153
        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = 100 * b + d - 4800 + (m // 10)
        return _historical_year(year), month, day

    def easter_days(self, year: int) -> int:
        """Days from 21 March to Easter Sunday (anonymous Gregorian computus)."""
        if year < 1:
            raise InvalidDateError(f"{self.name}: Easter is only defined for years >= 1, got {year}")
        a = year % 19
        b, c = divmod(year, 100)
        d, e = divmod(b, 4)
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        h = (19 * a + b - d - g + 15) % 30
        i, k = divmod(c, 4)
        l = (32 + 2 * e + 2 * i - h - k) % 7
        m = (a + 11 * h + 22 * l) // 451
        n = h + l - 7 * m + 114
        month, day = n // 31, n % 31 + 1
        # March 21 is day 0
        return day - 21 if month == 3 else day + 10

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.spec.kind, "jd_start": self.jd_start,
                "jd_end": self.jd_end, "months": 12, "year_zero": False}
