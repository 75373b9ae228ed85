"""
houses.py
=========
Tropical → sidereal conversion, Ascendant (Lagna) and Midheaven.

Source: Meeus Ch. 14 (ascendant); the midheaven is taken as the local
sidereal time itself, matching the simplified chart model.
"""

import math
from dataclasses import dataclass

from .angles import RAD, SIGNS, cos_deg, normalize, sign_index, sin_deg, tan_deg
from .ephemeris import PlanetaryLongitudeSet
from .errors import InvalidInput, check_result, require_finite, require_latitude

# Mean obliquity at J2000 (23°26'21.448")
DEFAULT_OBLIQUITY = 23.0 + 26.0/60 + 21.448/3600


@dataclass(frozen=True)
class AscendantResult:
    longitude:      float
    sign:           int
    degree_in_sign: float

    @property
    def sign_name(self) -> str:
        return SIGNS[self.sign]


# ---------------------------------------------------------------------------
# Tropical → sidereal
# ---------------------------------------------------------------------------

def sidereal_longitude(longitude: float, ayanamsa: float) -> float:
    return normalize(require_finite("longitude", longitude) - require_finite("ayanamsa", ayanamsa))


def tropical_to_sidereal(tropical: PlanetaryLongitudeSet, ayanamsa: float) -> PlanetaryLongitudeSet:
    """Subtract the ayanamsa from every body. Ketu stays Rahu + 180°."""
    if tropical.frame != "tropical":
        raise InvalidInput(f"expected tropical longitudes, got {tropical.frame!r}",
                           "frame", tropical.frame)
    return tropical.shifted(-require_finite("ayanamsa", ayanamsa), frame="sidereal")


# ---------------------------------------------------------------------------
# Ascendant / Midheaven
# ---------------------------------------------------------------------------

def ascendant(lst: float, latitude: float, obliquity: float = DEFAULT_OBLIQUITY) -> float:
    """
    Ecliptic degree rising on the eastern horizon.
    lst: Local Sidereal Time in degrees; latitude positive North.

    Undefined at the geographic poles, where tan(latitude) diverges.
    """
    lst = require_finite("lst", lst)
    obliquity = require_finite("obliquity", obliquity)
    latitude = require_latitude(latitude)
    if abs(latitude) >= 90.0:
        raise InvalidInput("ascendant is undefined at the poles", "latitude", latitude)

    y = cos_deg(lst)
    x = -sin_deg(lst)*cos_deg(obliquity) - tan_deg(latitude)*sin_deg(obliquity)
    asc = math.atan2(y, x) * RAD
    check_result("ascendant", asc, lst=lst, latitude=latitude, obliquity=obliquity)
    return normalize(asc)


def ascendant_result(longitude: float) -> AscendantResult:
    longitude = normalize(require_finite("longitude", longitude))
    sign = sign_index(longitude)
    return AscendantResult(
        longitude=longitude,
        sign=sign,
        degree_in_sign=min(max(longitude - sign*30.0, 0.0), math.nextafter(30.0, 0.0)),
    )


def midheaven(lst: float) -> float:
    return normalize(require_finite("lst", lst))
