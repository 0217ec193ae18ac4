from __future__ import annotations
from typing import Any, Dict

from ..core.types import DateInfo
from ..engines.specs import DAY_NAMES
from .registry import register_attribute

def _calendar(info: DateInfo):
    from ..api import get_calendar
    return get_calendar(info.date.calendar)

def weekday(info: DateInfo) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat
    return {"weekday": info.weekday, "day_name": DAY_NAMES[info.weekday]}

def month_name(info: DateInfo) -> Dict[str, Any]:
    d = info.date
    return {"month_name": _calendar(info).month_name(d.year, d.month)}

def day_of_year(info: DateInfo) -> Dict[str, Any]:
    d = info.date
    return {"day_of_year": info.jd - _calendar(info).ymd_to_jd(d.year, 1, 1) + 1}

register_attribute("weekday", weekday)
register_attribute("month_name", month_name)
register_attribute("day_of_year", day_of_year)
