"""
test_timekeeping.py
===================
Julian Day, sidereal time, local → UTC conversion and ayanamsa.

Run with: python -m pytest tests/ -v
"""

import math
from datetime import datetime

import pytest
from hypothesis import given, strategies as st

from panchang_engine.core.ayanamsa import AYANAMSA, ayanamsa, lahiri_ayanamsa, year_from_jd
from panchang_engine.core.errors import InvalidInput
from panchang_engine.core.timekeeping import (
    gmst, julian_centuries, julian_day, julian_moment, local_sidereal_time, local_to_utc, lst,
)


# ---------------------------------------------------------------------------
# Julian Day
# ---------------------------------------------------------------------------

def test_j2000_epoch_is_exact():
    assert julian_day(2000, 1, 1, 12, 0, 0) == 2451545.0
    m = julian_moment(2000, 1, 1, 12)
    assert m.julian_centuries == 0.0


@pytest.mark.parametrize("args, expected", [
    ((1900, 1, 1), 2415020.5),
    ((2023, 6, 21), 2460116.5),
    ((2024, 2, 29), 2460369.5),
])
def test_reference_julian_days(args, expected):
    assert julian_day(*args) == pytest.approx(expected, abs=1e-9)


def test_fractional_seconds_are_kept():
    a = julian_day(2024, 5, 1, 6, 30, 0.0)
    b = julian_day(2024, 5, 1, 6, 30, 30.5)
    assert (b - a) * 86400.0 == pytest.approx(30.5, abs=1e-4)


@pytest.mark.parametrize("args", [
    (2023, 2, 29),              # not a leap year
    (2024, 4, 31),
    (2024, 13, 1),
    (2024, 1, 1, 24),           # hour 24 is never wrapped
    (2024, 1, 1, 10, 60),
    (2024, 1, 1, 10, 0, 60.0),
    (2024, 1, 1, 10, 0, -1.0),
    (1799, 12, 31),
    (2201, 1, 1),
    (2024, 1, 1, 10, 0, float("nan")),
    (2024, 1, 1.5),
])
def test_invalid_civil_input_raises(args):
    with pytest.raises(InvalidInput):
        julian_day(*args)


@given(
    st.datetimes(min_value=datetime(1800, 1, 2), max_value=datetime(2200, 12, 30)),
    st.datetimes(min_value=datetime(1800, 1, 2), max_value=datetime(2200, 12, 30)),
)
def test_julian_day_tracks_elapsed_time(a, b):
    ja = julian_day(a.year, a.month, a.day, a.hour, a.minute, a.second)
    jb = julian_day(b.year, b.month, b.day, b.hour, b.minute, b.second)
    a0, b0 = a.replace(microsecond=0), b.replace(microsecond=0)
    assert jb - ja == pytest.approx((b0 - a0).total_seconds() / 86400.0, abs=1e-6)


def test_julian_centuries_rejects_nan():
    with pytest.raises(InvalidInput):
        julian_centuries(float("nan"))


# ---------------------------------------------------------------------------
# Sidereal time
# ---------------------------------------------------------------------------

def test_gmst_at_j2000():
    assert gmst(2451545.0) == pytest.approx(280.46061837, abs=1e-6)


@given(st.floats(min_value=2378496.5, max_value=2524958.5),
       st.floats(min_value=-180.0, max_value=180.0))
def test_sidereal_time_is_normalized(jd, lon):
    value = local_sidereal_time(jd, lon)
    assert 0.0 <= value < 360.0


@pytest.mark.parametrize("lon", [180.5, -181.0, float("inf")])
def test_lst_rejects_bad_longitude(lon):
    with pytest.raises(InvalidInput):
        lst(100.0, lon)


# ---------------------------------------------------------------------------
# Local → UTC
# ---------------------------------------------------------------------------

def test_local_to_utc_rolls_back_over_new_year():
    assert local_to_utc(2024, 1, 1, 2, 0, 0, timezone_offset=5.5) == (2023, 12, 31, 20, 30, 0.0)


def test_local_to_utc_rolls_into_leap_day():
    assert local_to_utc(2024, 3, 1, 0, 0, 30.25, timezone_offset=1.0) == (2024, 2, 29, 23, 0, 30.25)


def test_local_to_utc_western_offset_rolls_forward():
    assert local_to_utc(2024, 12, 31, 22, 15, 0, timezone_offset=-5.0) == (2025, 1, 1, 3, 15, 0.0)


@pytest.mark.parametrize("offset", [-12.5, 14.5, float("nan")])
def test_local_to_utc_rejects_bad_offset(offset):
    with pytest.raises(InvalidInput):
        local_to_utc(2024, 1, 1, 12, 0, 0, timezone_offset=offset)


# ---------------------------------------------------------------------------
# Ayanamsa
# ---------------------------------------------------------------------------

def test_lahiri_anchor_at_2000():
    assert lahiri_ayanamsa(2000.0) == pytest.approx(23.85045, abs=1e-9)


def test_lahiri_rate_per_year():
    assert lahiri_ayanamsa(2100.0) - lahiri_ayanamsa(2000.0) == pytest.approx(100 * 50.2882 / 3600.0)


@pytest.mark.parametrize("system", sorted(AYANAMSA))
def test_all_systems_near_modern_value(system):
    assert 20.0 <= ayanamsa(2000.0, system) <= 26.0


def test_ayanamsa_is_continuous_across_new_year():
    before = ayanamsa(year_from_jd(julian_day(2023, 12, 31, 23, 59)))
    after = ayanamsa(year_from_jd(julian_day(2024, 1, 1, 0, 1)))
    assert 0.0 < after - before < 1e-5


def test_unknown_ayanamsa_system_raises():
    with pytest.raises(InvalidInput):
        ayanamsa(2000.0, "krishnamurti-2")


def test_year_from_jd_at_epoch():
    assert year_from_jd(2451545.0) == 2000.0
    assert math.isclose(year_from_jd(2451545.0 + 365.25), 2001.0)
