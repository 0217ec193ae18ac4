#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ..core.errors import DependencyMissingError
from .round_trip import _need_numpy, parse_calendars, year_length_table

logger = logging.getLogger(__name__)


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise DependencyMissingError('Need matplotlib. Install: pip install "calsys[diagnostics]"') from e


def leap_fraction(np, calendar: str, start_year: int, end_year: int) -> float:
    """Share of leap years in [start_year, end_year]."""
    table = year_length_table(np, calendar, range(start_year, end_year + 1))
    return float(table[:, 2].mean())


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode diagram, one row per calendar.")
    p.add_argument("--calendars", default="gregorian,julian,jewish,arabic,persian,coptic")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=120)
    p.add_argument("--out", default="leap_years.png")
    p.add_argument("--title", default="Leap years by calendar (each in its own year numbering)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    names = parse_calendars(args.calendars)
    fig, ax = plt.subplots(figsize=(12, 0.6 * len(names) + 1.5))

    for row, name in enumerate(names):
        table = year_length_table(np, name, range(args.start_year, args.end_year + 1))
        leap = table[table[:, 2] == 1, 0]
        ax.scatter(leap, np.full(leap.shape, row), marker="s", s=18, color="0.15")
        share = leap_fraction(np, name, args.start_year, args.end_year)
        logger.info("%s: %d leap years, share %.4f", name, len(leap), share)
        print(f"{name:10s} leap years: {len(leap):4d}  share: {share:.4f}")

    ax.set_yticks(range(len(names)))
    ax.set_yticklabels(names)
    ax.set_xlim(args.start_year - 0.5, args.end_year + 0.5)
    ax.set_ylim(-0.5, len(names) - 0.5)
    ax.invert_yaxis()
    ax.set_xlabel("year")
    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    plt.close(fig)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
