"""
calsys.engines.factory
----------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations

from typing import Callable, Dict

from calsys.core.calendar import CalendarProtocol
from calsys.core.types import CalendarSpec
from calsys.engines.arabic import ArabicCalendar
from calsys.engines.coptic import CopticCalendar
from calsys.engines.french import FrenchCalendar
from calsys.engines.gregorian import GregorianCalendar
from calsys.engines.jewish import JewishCalendar
from calsys.engines.julian import JulianCalendar
from calsys.engines.persian import PersianCalendar

# Dispatch table: spec.kind -> constructor
BUILDERS: Dict[str, Callable[[CalendarSpec], CalendarProtocol]] = {
    "gregorian": GregorianCalendar,
    "julian": JulianCalendar,
    "jewish": JewishCalendar,
    "french": FrenchCalendar,
    "arabic": ArabicCalendar,
    "persian": PersianCalendar,
    "coptic": CopticCalendar,
}


def make_calendar(spec: CalendarSpec) -> CalendarProtocol:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Expected CalendarSpec, got {type(spec)}")
    try:
        builder = BUILDERS[spec.kind]
    except KeyError:
        raise TypeError(f"Unknown calendar kind: {spec.kind!r}") from None
    return builder(spec)
