# tests/test_julian.py

import random

import pytest

import calsys
from calsys import InvalidDateError, OutOfRangeError

J = calsys.get_calendar("julian")
G = calsys.get_calendar("gregorian")


def test_leap_rule_differs_from_gregorian():
    assert J.is_leap_year(1900)
    assert not G.is_leap_year(1900)
    assert J.is_leap_year(2000)
    assert not J.is_leap_year(1901)
    assert J.is_leap_year(-1)
    assert J.days_in_month(1900, 2) == 29


def test_reform_day():
    # Thursday 4 October 1582 (Julian) was followed by Friday 15 October 1582 (Gregorian)
    assert J.ymd_to_jd(1582, 10, 4) + 1 == G.ymd_to_jd(1582, 10, 15)
    assert J.jd_to_ymd(2299161) == (1582, 10, 5)


def test_epoch():
    assert J.jd_to_ymd(0) == (-4713, 1, 1)
    assert J.ymd_to_jd(-4713, 1, 1) == 0
    with pytest.raises(OutOfRangeError):
        J.jd_to_ymd(-1)
    with pytest.raises(InvalidDateError):
        J.ymd_to_jd(-4714, 12, 31)


def test_thirteen_day_offset():
    # 1 January 2000 (Gregorian) is 19 December 1999 (Julian)
    assert J.jd_to_ymd(2451545) == (1999, 12, 19)


def test_round_trip_random():
    random.seed(7)
    for _ in range(3000):
        jd = random.randint(0, 4_000_000)
        assert J.ymd_to_jd(*J.jd_to_ymd(jd)) == jd


def test_day_one_past_end():
    with pytest.raises(InvalidDateError):
        J.ymd_to_jd(1901, 2, 29)
    assert J.ymd_to_jd(1900, 2, 29) + 1 == J.ymd_to_jd(1900, 3, 1)


def test_easter():
    # Julian Easter 2000 fell on 17 April (Julian) = 30 April (Gregorian)
    assert J.easter_days(2000) == 27
    assert calsys.easter_jd(2000, calendar="julian") == G.ymd_to_jd(2000, 4, 30)


def test_year_zero_is_not_a_leap_year_query():
    with pytest.raises(InvalidDateError):
        J.is_leap_year(0)
    with pytest.raises(InvalidDateError):
        calsys.is_leap_year(0, calendar="julian")
