"""
ephemeris.py
============
Approximate tropical longitudes.
Low-order mean-element model for the nine Vedic bodies.

  Sun      mean longitude + equation of centre (Meeus Ch. 25, 3 terms)
  Moon     mean longitude + six largest periodic terms (Meeus Ch. 47)
  Mercury … Saturn
           mean heliocentric longitude, linear in days since J2000
  Rahu     mean ascending node, retrograde linear model
  Ketu     Rahu + 180°, always derived from Rahu

Accuracy is deliberately modest (Sun ≈0.01°, Moon ≈0.3°, outer bodies several
degrees). The model sits behind the ``Ephemeris`` protocol so a fuller theory
can replace it without touching the Panchang or scoring layers.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Protocol, Tuple

from .angles import J2000, JULIAN_CENTURY, normalize, sin_deg
from .errors import ComputationFailure, require_finite

PLANETS = ("Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Rahu", "Ketu")

# Mean longitude at J2000 (deg) and mean daily motion (deg/day)
MEAN_ELEMENTS = MappingProxyType({
    "Mercury": (252.250906, 4.092334436),
    "Venus":   (181.979801, 1.602130342),
    "Mars":    (355.433000, 0.524020680),
    "Jupiter": ( 34.351519, 0.083085290),
    "Saturn":  ( 50.077444, 0.033444140),
})

# Mean lunar node: 125.04452° at J2000, regressing 1934.136261°/century
RAHU_EPOCH = 125.04452
RAHU_DAILY_MOTION = -1934.136261 / JULIAN_CENTURY


# ── Longitude set ───────────────────────────────────────────────

@dataclass(frozen=True)
class PlanetaryLongitudeSet:
    sun:     float
    moon:    float
    mercury: float
    venus:   float
    mars:    float
    jupiter: float
    saturn:  float
    rahu:    float
    frame:   str = "tropical"

    def __post_init__(self):
        for name in PLANETS[:-1]:
            value = getattr(self, name.lower())
            if not math.isfinite(value):
                raise ComputationFailure("PlanetaryLongitudeSet", {name: value})
            object.__setattr__(self, name.lower(), normalize(value))

    @property
    def ketu(self) -> float:
        return normalize(self.rahu + 180.0)

    def __getitem__(self, name: str) -> float:
        if name not in PLANETS:
            raise KeyError(name)
        return getattr(self, name.lower())

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        for name in PLANETS:
            yield name, self[name]

    def as_dict(self) -> Dict[str, float]:
        return dict(self)

    def shifted(self, delta: float, frame: str) -> "PlanetaryLongitudeSet":
        """Every longitude moved by ``delta`` degrees. Ketu follows Rahu."""
        return PlanetaryLongitudeSet(
            **{name.lower(): self[name] + delta for name in PLANETS[:-1]},
            frame=frame,
        )


# ── Sun ─────────────────────────────────────────────────────────

def sun_longitude(T: float) -> float:
    """Geometric mean-equinox longitude of the Sun. T in Julian centuries."""
    L0 = normalize(280.46646 + 36000.76983*T + 0.0003032*T*T)
    M  = normalize(357.52911 + 35999.05029*T - 0.0001537*T*T)
    C = ((1.914602 - 0.004817*T - 0.000014*T*T)*sin_deg(M)
         + (0.019993 - 0.000101*T)*sin_deg(2*M)
         + 0.000289*sin_deg(3*M))
    return normalize(L0 + C)


# ── Moon ────────────────────────────────────────────────────────

def moon_longitude(T: float) -> float:
    Lp = normalize(218.3164477 + 481267.88123421*T - 0.0015786*T*T)
    D  = normalize(297.8501921 + 445267.1114034*T  - 0.0018819*T*T)
    M  = normalize(357.5291092 + 35999.0502909*T   - 0.0001536*T*T)
    Mp = normalize(134.9633964 + 477198.8675055*T  + 0.0087414*T*T)
    F  = normalize( 93.2720950 + 483202.0175233*T  - 0.0036539*T*T)

    correction = (6.288774*sin_deg(Mp)
                  + 1.274027*sin_deg(2*D - Mp)
                  + 0.658314*sin_deg(2*D)
                  + 0.213618*sin_deg(2*Mp)
                  - 0.185116*sin_deg(M)
                  - 0.114332*sin_deg(2*F))
    return normalize(Lp + correction)


# ── Planets & nodes ─────────────────────────────────────────────

def mean_planet_longitude(planet: str, days: float) -> float:
    epoch, rate = MEAN_ELEMENTS[planet]
    return normalize(epoch + rate*days)


def rahu_longitude(days: float) -> float:
    """Mean ascending node. Moves backwards through the zodiac."""
    return normalize(RAHU_EPOCH + RAHU_DAILY_MOTION*days)


def mean_obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic in degrees. Meeus Ch. 22."""
    T = (require_finite("julian_day", jd) - J2000) / JULIAN_CENTURY
    return (23.0 + 26.0/60 + 21.448/3600
            - (46.8150*T + 0.00059*T*T - 0.001813*T*T*T)/3600.0)


# ── Ephemeris interface ─────────────────────────────────────────

class Ephemeris(Protocol):
    def tropical_positions(self, jd: float) -> PlanetaryLongitudeSet:
        ...


class ApproximateEphemeris:
    """Default ``Ephemeris``: the low-order model above."""

    name = "approximate"

    def tropical_positions(self, jd: float) -> PlanetaryLongitudeSet:
        jd = require_finite("julian_day", jd)
        days = jd - J2000
        T = days / JULIAN_CENTURY
        return PlanetaryLongitudeSet(
            sun=sun_longitude(T),
            moon=moon_longitude(T),
            mercury=mean_planet_longitude("Mercury", days),
            venus=mean_planet_longitude("Venus", days),
            mars=mean_planet_longitude("Mars", days),
            jupiter=mean_planet_longitude("Jupiter", days),
            saturn=mean_planet_longitude("Saturn", days),
            rahu=rahu_longitude(days),
            frame="tropical",
        )


DEFAULT_EPHEMERIS = ApproximateEphemeris()


def tropical_positions(jd: float) -> PlanetaryLongitudeSet:
    return DEFAULT_EPHEMERIS.tropical_positions(jd)
