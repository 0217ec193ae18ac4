# tests/test_other_calendars.py
#
# French Republican, Arabic (tabular Hijri), Persian and Coptic systems.

import random

import pytest

import calsys
from calsys import CalendarSpec, InvalidDateError, OutOfRangeError

F = calsys.get_calendar("french")
A = calsys.get_calendar("arabic")
P = calsys.get_calendar("persian")
C = calsys.get_calendar("coptic")


# ---------------------------------------------------------
# French
# ---------------------------------------------------------

def test_french_range():
    assert F.jd_start == 2375840
    assert F.jd_end == 2380952
    assert F.ymd_to_jd(1, 1, 1) == 2375840
    assert F.jd_to_ymd(2380952) == (14, 13, 5)
    with pytest.raises(OutOfRangeError):
        F.jd_to_ymd(2375839)
    with pytest.raises(OutOfRangeError):
        F.jd_to_ymd(2380953)
    with pytest.raises(InvalidDateError):
        F.ymd_to_jd(15, 1, 1)
    with pytest.raises(InvalidDateError):
        F.ymd_to_jd(0, 1, 1)


def test_french_known_dates():
    # 18 Brumaire VIII = 9 November 1799
    assert F.ymd_to_jd(8, 2, 18) == calsys.ymd_to_jd(1799, 11, 9)
    assert calsys.convert(1792, 9, 22, source="gregorian", target="french").as_tuple() == (1, 1, 1)


def test_french_sextile_years():
    assert [y for y in range(1, 15) if F.is_leap_year(y)] == [3, 7, 11]
    assert F.days_in_month(3, 13) == 6
    assert F.days_in_month(4, 13) == 5
    assert F.days_in_month(4, 1) == 30
    with pytest.raises(InvalidDateError):
        F.ymd_to_jd(4, 13, 6)


def test_french_tweak_extends_range():
    cal = calsys.make_calendar(CalendarSpec.like("french").tweak(max_year=20))
    assert cal.max_year == 20
    assert cal.jd_end > F.jd_end
    assert cal.jd_to_ymd(cal.ymd_to_jd(18, 13, 5)) == (18, 13, 5)


def test_french_round_trip_full_range():
    for jd in range(F.jd_start, F.jd_end + 1):
        assert F.ymd_to_jd(*F.jd_to_ymd(jd)) == jd


# ---------------------------------------------------------
# Arabic
# ---------------------------------------------------------

def test_arabic_epoch():
    assert A.ymd_to_jd(1, 1, 1) == 1948440
    assert calsys.convert(1, 1, 1, source="arabic", target="julian").as_tuple() == (622, 7, 16)
    with pytest.raises(OutOfRangeError):
        A.jd_to_ymd(1948439)


def test_arabic_new_year_1445():
    assert calsys.convert(1445, 1, 1, source="arabic", target="gregorian").as_tuple() == (2023, 7, 19)


def test_arabic_leap_years():
    assert [y for y in range(1, 31) if A.is_leap_year(y)] == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    assert A.days_in_month(2, 12) == 30
    assert A.days_in_month(1, 12) == 29
    assert A.days_in_month(1, 1) == 30
    assert A.days_in_month(1, 2) == 29
    with pytest.raises(InvalidDateError):
        A.ymd_to_jd(1, 12, 30)


def test_arabic_round_trip_random():
    random.seed(3)
    for _ in range(3000):
        jd = random.randint(A.jd_start, 3_500_000)
        assert A.ymd_to_jd(*A.jd_to_ymd(jd)) == jd


# ---------------------------------------------------------
# Persian
# ---------------------------------------------------------

def test_persian_epoch():
    assert P.ymd_to_jd(1, 1, 1) == 1948321
    assert P.jd_to_ymd(1948321) == (1, 1, 1)
    with pytest.raises(OutOfRangeError):
        P.jd_to_ymd(1948320)


def test_persian_nowruz_1403():
    assert calsys.convert(1403, 1, 1, source="persian", target="gregorian").as_tuple() == (2024, 3, 20)


def test_persian_month_lengths():
    assert [P.days_in_month(1400, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert P.is_leap_year(1399)
    assert not P.is_leap_year(1400)
    assert P.days_in_month(1399, 12) == 30
    assert P.days_in_year(1399) == 366


def test_persian_round_trip_random():
    random.seed(5)
    for _ in range(3000):
        jd = random.randint(P.jd_start, 3_500_000)
        assert P.ymd_to_jd(*P.jd_to_ymd(jd)) == jd


# ---------------------------------------------------------
# Coptic
# ---------------------------------------------------------

def test_coptic_epoch():
    assert C.ymd_to_jd(1, 1, 1) == 1825030
    assert calsys.convert(1, 1, 1, source="coptic", target="julian").as_tuple() == (284, 8, 29)
    with pytest.raises(OutOfRangeError):
        C.jd_to_ymd(1825029)


def test_coptic_new_year_1740():
    assert calsys.convert(1740, 1, 1, source="coptic", target="gregorian").as_tuple() == (2023, 9, 12)


def test_coptic_epagomenal_days():
    assert C.is_leap_year(1739)
    assert C.days_in_month(1739, 13) == 6
    assert C.days_in_month(1740, 13) == 5
    assert C.month_name(1740, 13) == "Pi Kogi Enavot"
    with pytest.raises(InvalidDateError):
        C.ymd_to_jd(1740, 13, 6)


def test_coptic_round_trip_random():
    random.seed(9)
    for _ in range(3000):
        jd = random.randint(C.jd_start, 3_500_000)
        assert C.ymd_to_jd(*C.jd_to_ymd(jd)) == jd
