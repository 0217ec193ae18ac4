from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import calsys


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_grid(calendar: str, Y: int, M: int, *, companion: str = "gregorian") -> List[List[Tuple[str, str]]]:
    """
    Weeks (Monday first) of (top, bottom) cells for one month.
    Top is the day in `calendar`, bottom the same day in `companion`.
    """
    cal = calsys.get_calendar(calendar)
    first = cal.ymd_to_jd(Y, M, 1)
    n = cal.days_in_month(Y, M)

    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = []
    pad = (calsys.day_of_week(first) + 6) % 7  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for jd in range(first, first + n):
        _, cm, cd = calsys.jd_to_ymd(jd, calendar=companion)
        day = jd - first + 1
        wk.append(cell(f"{day:2d}", f"{cm:02d}-{cd:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def format_grid(title: str, weeks: List[List[Tuple[str, str]]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def month_calendar(calendar: str, Y: int, M: int, *, companion: str = "gregorian") -> str:
    name = calsys.get_calendar(calendar).month_name(Y, M)
    title = f"{calendar} {name} {Y}  (month {M}, {companion} below)"
    return format_grid(title, month_grid(calendar, Y, M, companion=companion))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="calsys month",
        description="Print a month calendar with the matching days of a second calendar.",
    )
    p.add_argument("calendar", help="calendar name, e.g. jewish")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--companion", default="gregorian", help="calendar shown on the second row")
    args = p.parse_args(argv)

    print(month_calendar(args.calendar, args.year, args.month, companion=args.companion))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
