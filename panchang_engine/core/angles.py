"""
angles.py
=========
Angle constants and helpers shared by every calculation module.

Every longitude, sidereal time and ascendant handed between modules is
normalized into [0, 360) with ``normalize``.
"""

import math

J2000          = 2451545.0
JULIAN_CENTURY = 36525.0
JULIAN_YEAR    = 365.25
DEG            = math.pi / 180.0
RAD            = 180.0 / math.pi
ARCSEC         = 1.0 / 3600.0

SIGNS = ("Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
         "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces")


def normalize(x: float) -> float:
    """Normalize angle to [0, 360)."""
    r = x % 360.0
    # x % 360.0 returns 360.0 for tiny negative x
    if r >= 360.0:
        return 0.0
    return r + 0.0


def angular_distance(a: float, b: float) -> float:
    """Smaller arc between two longitudes, in [0, 180]."""
    d = normalize(a - b)
    return min(d, 360.0 - d)


def sin_deg(x: float) -> float:
    return math.sin(x * DEG)


def cos_deg(x: float) -> float:
    return math.cos(x * DEG)


def tan_deg(x: float) -> float:
    return math.tan(x * DEG)


def sign_index(longitude: float) -> int:
    return min(int(normalize(longitude) // 30.0), 11)


def dms(degrees: float) -> str:
    """Format decimal degrees as D°M'S\" string."""
    d = int(degrees)
    m_float = (degrees - d) * 60
    m = int(m_float)
    s = round((m_float - m) * 60, 1)
    return f"{d}°{m}'{s}\""
