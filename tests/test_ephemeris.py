"""
test_ephemeris.py
=================
Approximate ephemeris, tropical → sidereal conversion and ascendant.
"""

import math

import pytest
from hypothesis import given, strategies as st

from panchang_engine.core.angles import angular_distance, normalize, sign_index
from panchang_engine.core.ephemeris import (
    PLANETS, ApproximateEphemeris, PlanetaryLongitudeSet, mean_obliquity, tropical_positions,
)
from panchang_engine.core.errors import ComputationFailure, InvalidInput
from panchang_engine.core.houses import (
    ascendant, ascendant_result, midheaven, sidereal_longitude, tropical_to_sidereal,
)

JD_RANGE = st.floats(min_value=2378496.5, max_value=2524958.5)
ANGLES = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False)


def _set(**overrides):
    base = dict(sun=10.0, moon=20.0, mercury=30.0, venus=40.0, mars=50.0,
                jupiter=60.0, saturn=70.0, rahu=18.2)
    base.update(overrides)
    return PlanetaryLongitudeSet(**base)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

@given(ANGLES)
def test_normalize_range(x):
    assert 0.0 <= normalize(x) < 360.0


@pytest.mark.parametrize("x, expected", [(360.0, 0.0), (-0.0, 0.0), (-1e-15, 0.0), (725.0, 5.0), (-30.0, 330.0)])
def test_normalize_edges(x, expected):
    assert normalize(x) == pytest.approx(expected, abs=1e-12)
    assert normalize(x) < 360.0


# ---------------------------------------------------------------------------
# Longitude set
# ---------------------------------------------------------------------------

def test_ketu_is_rahu_plus_180():
    assert _set(rahu=18.2).ketu == pytest.approx(198.2)
    assert _set(rahu=270.0).ketu == pytest.approx(90.0)


def test_set_normalizes_and_iterates_all_nine():
    s = _set(sun=370.0, moon=-10.0)
    assert s.sun == pytest.approx(10.0)
    assert s.moon == pytest.approx(350.0)
    assert tuple(name for name, _ in s) == PLANETS
    assert s["Ketu"] == s.ketu


def test_set_rejects_non_finite_values():
    with pytest.raises(ComputationFailure) as exc:
        _set(mars=float("nan"))
    assert exc.value.operation == "PlanetaryLongitudeSet"


def test_unknown_body_lookup():
    with pytest.raises(KeyError):
        _set()["Uranus"]


# ---------------------------------------------------------------------------
# Ephemeris
# ---------------------------------------------------------------------------

@given(JD_RANGE)
def test_positions_are_normalized(jd):
    for _, lon in tropical_positions(jd):
        assert 0.0 <= lon < 360.0


@given(JD_RANGE, st.floats(min_value=0.0, max_value=50.0))
def test_rahu_ketu_opposition_sidereal(jd, ay):
    sid = tropical_to_sidereal(tropical_positions(jd), ay)
    assert angular_distance(sid.rahu, sid.ketu) == pytest.approx(180.0, abs=1e-9)


def test_ephemeris_is_deterministic():
    eph = ApproximateEphemeris()
    assert eph.tropical_positions(2460000.25) == eph.tropical_positions(2460000.25)


def test_sun_near_march_equinox():
    # 2000-03-20 07:35 UT equinox
    sun = tropical_positions(2451623.816).sun
    assert angular_distance(sun, 0.0) < 0.1


def test_rahu_moves_backwards():
    a = tropical_positions(2451545.0).rahu
    b = tropical_positions(2451546.0).rahu
    assert normalize(a - b) == pytest.approx(0.05295, abs=1e-4)


@pytest.mark.parametrize("jd", [float("nan"), float("inf"), "soon"])
def test_non_finite_julian_day_raises(jd):
    with pytest.raises(InvalidInput):
        tropical_positions(jd)


def test_mean_obliquity_at_j2000():
    assert mean_obliquity(2451545.0) == pytest.approx(23.4392911, abs=1e-6)


# ---------------------------------------------------------------------------
# Coordinate transform
# ---------------------------------------------------------------------------

def test_tropical_to_sidereal_shifts_every_body():
    trop = _set()
    sid = tropical_to_sidereal(trop, 24.0)
    assert sid.frame == "sidereal"
    for (name, t), (_, s) in zip(trop, sid):
        assert normalize(t - 24.0) == pytest.approx(s), name


def test_sidereal_input_is_rejected():
    with pytest.raises(InvalidInput):
        tropical_to_sidereal(_set().shifted(0.0, "sidereal"), 24.0)


def test_sidereal_longitude_wraps():
    assert sidereal_longitude(10.0, 24.0) == pytest.approx(346.0)


@given(st.floats(min_value=0.0, max_value=360.0, exclude_max=True),
       st.floats(min_value=-89.0, max_value=89.0))
def test_ascendant_sign_consistency(lst_deg, lat):
    asc = ascendant_result(ascendant(lst_deg, lat))
    assert 0.0 <= asc.longitude < 360.0
    assert 0 <= asc.sign <= 11
    assert asc.sign * 30.0 <= asc.longitude + 1e-9 < (asc.sign + 1) * 30.0 + 1e-9
    assert 0.0 <= asc.degree_in_sign < 30.0
    assert asc.sign == sign_index(asc.longitude)


def test_ascendant_at_equator_aries_rising():
    # LST 270° at the equator puts 0° Aries on the eastern horizon
    assert angular_distance(ascendant(270.0, 0.0), 0.0) < 1e-9


@pytest.mark.parametrize("lat", [90.0, -90.0])
def test_ascendant_undefined_at_poles(lat):
    with pytest.raises(InvalidInput):
        ascendant(100.0, lat)


@pytest.mark.parametrize("lat", [90.5, float("nan")])
def test_ascendant_rejects_bad_latitude(lat):
    with pytest.raises(InvalidInput):
        ascendant(100.0, lat)


def test_ascendant_result_caps_degree_below_30():
    r = ascendant_result(59.5)
    assert (r.sign, r.sign_name) == (1, "Taurus")
    assert r.degree_in_sign == pytest.approx(29.5)
    last = ascendant_result(math.nextafter(360.0, 0.0))
    assert last.sign == 11
    assert last.degree_in_sign < 30.0


def test_midheaven_is_normalized_lst():
    assert midheaven(370.0) == pytest.approx(10.0)
