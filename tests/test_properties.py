# tests/test_properties.py
#
# Properties every calendar system must satisfy.

import random

import pytest

import calsys
from calsys import InvalidDateError
from calsys.core.calendar import CalendarProtocol

ALL = ["gregorian", "julian", "jewish", "french", "arabic", "persian", "coptic"]

# month that absorbs the leap day, for systems with a leap *day*
LEAP_MONTH = {"gregorian": 2, "julian": 2, "french": 13, "arabic": 12, "persian": 12, "coptic": 13}


def _span(cal, days=400_000):
    return cal.jd_start, min(cal.jd_end, cal.jd_start + days)


def test_all_registered():
    assert sorted(ALL) == calsys.list_calendars()


@pytest.mark.parametrize("name", ALL)
def test_protocol(name):
    assert isinstance(calsys.get_calendar(name), CalendarProtocol)


@pytest.mark.parametrize("name", ALL)
def test_jd_round_trip(name):
    cal = calsys.get_calendar(name)
    lo, hi = _span(cal)
    random.seed(100)
    for _ in range(1500):
        j = random.randint(lo, hi)
        assert cal.ymd_to_jd(*cal.jd_to_ymd(j)) == j
    # range boundaries
    assert cal.ymd_to_jd(*cal.jd_to_ymd(cal.jd_start)) == cal.jd_start
    assert cal.ymd_to_jd(*cal.jd_to_ymd(cal.jd_end)) == cal.jd_end


@pytest.mark.parametrize("name", ALL)
def test_civil_round_trip(name):
    """Every valid (y, m, d) in a block of years maps back to itself."""
    cal = calsys.get_calendar(name)
    y0 = cal.jd_to_ymd(_span(cal, 2000)[1])[0]
    for y in range(y0, y0 + 4):
        for m in range(1, cal.months_in_year() + 1):
            try:
                n = cal.days_in_month(y, m)
            except InvalidDateError:
                continue  # month absent this year
            for d in range(1, n + 1):
                assert cal.jd_to_ymd(cal.ymd_to_jd(y, m, d)) == (y, m, d)


@pytest.mark.parametrize("name", ALL)
def test_monotonic_and_contiguous(name):
    cal = calsys.get_calendar(name)
    lo = cal.jd_start
    prev = cal.jd_to_ymd(lo)
    for j in range(lo + 1, min(cal.jd_end, lo + 3000) + 1):
        cur = cal.jd_to_ymd(j)
        assert cur > prev
        if cur[2] != 1:
            assert cur == (prev[0], prev[1], prev[2] + 1)
        else:
            assert prev[2] == cal.days_in_month(prev[0], prev[1])
        prev = cur


@pytest.mark.parametrize("name", sorted(LEAP_MONTH))
def test_leap_day_count(name):
    cal = calsys.get_calendar(name)
    month = LEAP_MONTH[name]
    y = cal.jd_to_ymd(_span(cal, 5000)[1])[0]
    while not cal.is_leap_year(y):
        y += 1
    common = y + 1
    while cal.is_leap_year(common):
        common += 1
    assert cal.days_in_month(y, month) - cal.days_in_month(common, month) == 1
    assert cal.days_in_year(y) - cal.days_in_year(common) == 1


@pytest.mark.parametrize("name", ALL)
def test_one_past_last_day(name):
    cal = calsys.get_calendar(name)
    y, m, _ = cal.jd_to_ymd(_span(cal, 1000)[1])
    last = cal.days_in_month(y, m)
    cal.ymd_to_jd(y, m, last)
    with pytest.raises(InvalidDateError):
        cal.ymd_to_jd(y, m, last + 1)


@pytest.mark.parametrize("name", ALL)
def test_month_out_of_range(name):
    cal = calsys.get_calendar(name)
    y = cal.jd_to_ymd(_span(cal, 1000)[1])[0]
    for m in (0, cal.months_in_year() + 1):
        with pytest.raises(InvalidDateError):
            cal.days_in_month(y, m)
        with pytest.raises(InvalidDateError):
            cal.ymd_to_jd(y, m, 1)


@pytest.mark.parametrize("name", ALL)
def test_month_names(name):
    cal = calsys.get_calendar(name)
    y = cal.jd_to_ymd(cal.jd_start)[0]
    names = [cal.month_name(y, m) for m in range(1, cal.months_in_year() + 1)]
    assert all(isinstance(n, str) and n for n in names)


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("bad", [True, False, "2000", 2000.0, None])
def test_non_integer_year_rejected(name, bad):
    cal = calsys.get_calendar(name)
    with pytest.raises(InvalidDateError):
        cal.ymd_to_jd(bad, 1, 1)
    with pytest.raises(InvalidDateError):
        cal.is_leap_year(bad)
    with pytest.raises(InvalidDateError):
        cal.days_in_month(bad, 1)
    with pytest.raises(InvalidDateError):
        cal.days_in_year(bad)


@pytest.mark.parametrize("name", ALL)
def test_bool_month_and_day_rejected(name):
    cal = calsys.get_calendar(name)
    y = cal.jd_to_ymd(_span(cal, 1000)[1])[0]
    with pytest.raises(InvalidDateError):
        cal.ymd_to_jd(y, True, 1)
    with pytest.raises(InvalidDateError):
        cal.ymd_to_jd(y, 1, True)
    with pytest.raises(InvalidDateError):
        cal.days_in_month(y, True)
    with pytest.raises(InvalidDateError):
        calsys.ymd_to_jd(True, 1, 1, calendar=name)
