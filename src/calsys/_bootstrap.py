from __future__ import annotations
import logging

from calsys.core.calendar import CalendarRegistry
from calsys.engines.factory import make_calendar
from calsys.engines.specs import ALL_SPECS

logger = logging.getLogger(__name__)

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    logger.debug("Built calendar registry: %s", sorted(calendars))
    return CalendarRegistry(calendars)
