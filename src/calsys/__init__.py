"""calsys public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    days_in_month,
    is_leap_year,
    ymd_to_jd,
    jd_to_ymd,
    to_civil,
    convert,
    date_info,
    day_of_week,
    day_name,
    easter_days,
    easter_jd,
    jd_to_unix,
    unix_to_jd,
    to_date,
    from_date,
)
from .core.errors import (
    CalsysError,
    InvalidDateError,
    OutOfRangeError,
    CalendarUnavailableError,
    DependencyMissingError,
)
from .core.types import CalendarSpec, CivilDate, DateInfo

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "days_in_month",
    "is_leap_year",
    "ymd_to_jd",
    "jd_to_ymd",
    "to_civil",
    "convert",
    "date_info",
    "day_of_week",
    "day_name",
    "easter_days",
    "easter_jd",
    "jd_to_unix",
    "unix_to_jd",
    "to_date",
    "from_date",
    "CalsysError",
    "InvalidDateError",
    "OutOfRangeError",
    "CalendarUnavailableError",
    "DependencyMissingError",
    "CalendarSpec",
    "CivilDate",
    "DateInfo",
]
