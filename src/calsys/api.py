from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes.registry import compute_attributes
from .core import time as _time
from .core.calendar import CalendarProtocol, CalendarRegistry
from .core.errors import InvalidDateError
from .core.types import CalendarSpec, CivilDate, DateInfo
from .engines.factory import make_calendar as _make_calendar
from .engines.specs import DAY_NAMES

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

# ============================================================
# Registry
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def get_calendar(name: str) -> CalendarProtocol:
    return _reg().get(name)

def make_calendar(spec: CalendarSpec) -> CalendarProtocol:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: CalendarProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# The four conversion operations
# ============================================================

def days_in_month(year: int, month: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_in_month(year, month)

def is_leap_year(year: int, *, calendar: str = "gregorian") -> bool:
    return _reg().get(calendar).is_leap_year(year)

def ymd_to_jd(year: int, month: int, day: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).ymd_to_jd(year, month, day)

def jd_to_ymd(jd: int, *, calendar: str = "gregorian") -> Tuple[int, int, int]:
    return _reg().get(calendar).jd_to_ymd(jd)

# ============================================================
# Helpers built on top of them
# ============================================================

def to_civil(jd: int, *, calendar: str = "gregorian") -> CivilDate:
    y, m, d = _reg().get(calendar).jd_to_ymd(jd)
    return CivilDate(calendar, y, m, d)

def convert(year: int, month: int, day: int, *, source: str, target: str) -> CivilDate:
    """Convert a civil date between two calendar systems via its JDN."""
    jd = _reg().get(source).ymd_to_jd(year, month, day)
    return to_civil(jd, calendar=target)

def day_of_week(jd: int) -> int:
    """0=Sunday .. 6=Saturday."""
    return _time.day_of_week(jd)

def day_name(jd: int) -> str:
    return DAY_NAMES[_time.day_of_week(jd)]

def date_info(
    jd: int,
    *,
    calendar: str = "gregorian",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DateInfo:
    cal = _reg().get(calendar)
    civil = to_civil(jd, calendar=calendar)
    info = DateInfo(
        jd=jd,
        date=civil,
        weekday=_time.day_of_week(jd),
        debug={
            "calendar": cal.info(),
            "is_leap_year": cal.is_leap_year(civil.year),
            "days_in_month": cal.days_in_month(civil.year, civil.month),
        } if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def easter_days(year: int, *, calendar: str = "gregorian") -> int:
    """Days after 21 March on which Easter Sunday falls."""
    cal = _reg().get(calendar)
    if not hasattr(cal, "easter_days"):
        raise InvalidDateError(f"Calendar '{calendar}' does not define Easter")
    return cal.easter_days(year)

def easter_jd(year: int, *, calendar: str = "gregorian") -> int:
    cal = _reg().get(calendar)
    return cal.ymd_to_jd(year, 3, 21) + easter_days(year, calendar=calendar)

def jd_to_unix(jd: int) -> int:
    return _time.jd_to_unix(jd)

def unix_to_jd(timestamp: int | float) -> int:
    return _time.unix_to_jd(timestamp)

def to_date(jd: int) -> date:
    return _time.from_jdn(jd)

def from_date(d: date) -> int:
    return _time.to_jdn(d)
