from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple, runtime_checkable

from .errors import CalendarUnavailableError

logger = logging.getLogger(__name__)

@runtime_checkable
class CalendarProtocol(Protocol):
    """
    Shared capability set of every calendar system.

    Civil dates are (year, month, day) triples; the common interchange value
    is the integer Julian Day Number (JDN).
    """
    name: str
    jd_start: int
    jd_end: int

    def months_in_year(self) -> int: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def is_leap_year(self, year: int) -> bool: ...
    def jd_to_ymd(self, jd: int) -> Tuple[int, int, int]: ...
    def ymd_to_jd(self, year: int, month: int, day: int) -> int: ...
    def month_name(self, year: int, month: int) -> str: ...
    def info(self) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarProtocol]

    def get(self, name: str) -> CalendarProtocol:
        if name not in self._calendars:
            raise CalendarUnavailableError(
                f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}"
            )
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        if name in self._calendars:
            logger.info("Replacing calendar %r", name)
        else:
            logger.debug("Registering calendar %r", name)
        self._calendars[name] = calendar
