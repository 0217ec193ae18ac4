from __future__ import annotations

from typing import Dict

from ..core.types import JD_MAX, CalendarSpec
from .arabic import ARABIC_EPOCH
from .coptic import COPTIC_EPOCH
from .jewish import JEWISH_EPOCH
from .persian import PERSIAN_EPOCH


# ============================================================
# MONTH NAMES
# ============================================================

ROMAN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

JEWISH_MONTHS = (
    "Tishri", "Heshvan", "Kislev", "Tevet", "Shevat", "Adar I", "Adar II",
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
)

FRENCH_MONTHS = (
    "Vendemiaire", "Brumaire", "Frimaire", "Nivose", "Pluviose", "Ventose",
    "Germinal", "Floreal", "Prairial", "Messidor", "Thermidor", "Fructidor",
    "Extra",
)

ARABIC_MONTHS = (
    "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
    "Jumada al-awwal", "Jumada al-thani", "Rajab", "Sha'aban",
    "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
)

PERSIAN_MONTHS = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)

COPTIC_MONTHS = (
    "Thout", "Paopi", "Hathor", "Koiak", "Tobi", "Meshir", "Paremhat",
    "Parmouti", "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot",
)

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


# ============================================================
# STANDARD SPECS
# ============================================================

GREGORIAN_SPEC = CalendarSpec(
    kind="gregorian", name="gregorian",
    jd_start=0, jd_end=JD_MAX,
    months=12, month_names=ROMAN_MONTHS,
)

JULIAN_SPEC = CalendarSpec(
    kind="julian", name="julian",
    jd_start=0, jd_end=JD_MAX,
    months=12, month_names=ROMAN_MONTHS,
)

JEWISH_SPEC = CalendarSpec(
    kind="jewish", name="jewish",
    jd_start=JEWISH_EPOCH, jd_end=JD_MAX,
    months=13, month_names=JEWISH_MONTHS,
    options={"common_adar_name": "Adar"},
)

# An I .. An XIV; the calendar was abolished at the end of An XIV
FRENCH_SPEC = CalendarSpec(
    kind="french", name="french",
    jd_start=0, jd_end=JD_MAX,
    months=13, month_names=FRENCH_MONTHS,
    options={"max_year": 14},
)

ARABIC_SPEC = CalendarSpec(
    kind="arabic", name="arabic",
    jd_start=ARABIC_EPOCH, jd_end=JD_MAX,
    months=12, month_names=ARABIC_MONTHS,
)

PERSIAN_SPEC = CalendarSpec(
    kind="persian", name="persian",
    jd_start=PERSIAN_EPOCH, jd_end=JD_MAX,
    months=12, month_names=PERSIAN_MONTHS,
)

COPTIC_SPEC = CalendarSpec(
    kind="coptic", name="coptic",
    jd_start=COPTIC_EPOCH, jd_end=JD_MAX,
    months=13, month_names=COPTIC_MONTHS,
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    s.name: s
    for s in (
        GREGORIAN_SPEC,
        JULIAN_SPEC,
        JEWISH_SPEC,
        FRENCH_SPEC,
        ARABIC_SPEC,
        PERSIAN_SPEC,
        COPTIC_SPEC,
    )
}
