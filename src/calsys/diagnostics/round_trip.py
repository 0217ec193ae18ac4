"""
Random round-trip and monotonicity checks over every registered calendar:

  ymd_to_jd(jd_to_ymd(j)) == j   for sampled j in the supported range
  jd_to_ymd is strictly increasing across consecutive days
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import calsys
from calsys.core.errors import DependencyMissingError

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyMissingError('Need numpy. Install: pip install "calsys[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def sample_jds(np, calendar: str, N: int, seed: int, *, span: int = 2_000_000) -> "np.ndarray":
    """Uniform sample of N JDNs from the first `span` days of the calendar's range."""
    cal = calsys.get_calendar(calendar)
    lo = cal.jd_start
    hi = min(cal.jd_end, cal.jd_start + span)
    rng = np.random.default_rng(seed)
    return rng.integers(lo, hi, size=N, endpoint=True)


def roundtrip_test(np, calendar: str, N: int, seed: int, *, max_failures: int) -> int:
    cal = calsys.get_calendar(calendar)
    failures = 0
    for j in sample_jds(np, calendar, N, seed).tolist():
        ymd = cal.jd_to_ymd(j)
        back = cal.ymd_to_jd(*ymd)
        if back != j:
            failures += 1
            print(f"FAIL (round-trip) {calendar}: jd={j} -> {ymd} -> {back}")
            if failures >= max_failures:
                return failures
    return failures


def monotonic_test(np, calendar: str, N: int, seed: int, *, max_failures: int) -> int:
    """Consecutive days map to strictly increasing (y, m, d) with no gaps."""
    cal = calsys.get_calendar(calendar)
    failures = 0
    for j in sample_jds(np, calendar, N, seed + 1).tolist():
        if j + 1 > cal.jd_end:
            continue
        a = cal.jd_to_ymd(j)
        b = cal.jd_to_ymd(j + 1)
        if not a < b:
            failures += 1
            print(f"FAIL (order) {calendar}: {j}->{a}, {j + 1}->{b}")
        elif b[2] != 1 and b != (a[0], a[1], a[2] + 1):
            failures += 1
            print(f"FAIL (gap) {calendar}: {j}->{a}, {j + 1}->{b}")
        if failures >= max_failures:
            return failures
    return failures


def year_length_table(np, calendar: str, years: range) -> "np.ndarray":
    """Array of (year, days_in_year, is_leap) rows."""
    cal = calsys.get_calendar(calendar)
    rows = [(y, cal.days_in_year(y), int(cal.is_leap_year(y))) for y in years if y != 0]
    return np.array(rows, dtype=np.int64)


def main(argv: Optional[List[str]] = None) -> int:
    np = _need_numpy()

    p = argparse.ArgumentParser(description="Random round-trip tests: jd -> (y, m, d) -> jd.")
    p.add_argument("--calendars", type=str, default=",".join(calsys.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total_fail = 0
    for name in parse_calendars(args.calendars):
        logger.info("Testing %s ...", name)
        print(f"Testing {name} ...")
        total_fail += roundtrip_test(np, name, args.N, args.seed, max_failures=args.max_failures)
        total_fail += monotonic_test(np, name, args.N, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
