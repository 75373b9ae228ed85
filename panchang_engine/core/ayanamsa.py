"""
ayanamsa.py
===========
Sidereal correction angle (ayanamsa) per calendar year.

Linear precession models anchored at the 2000.0 epoch value. The year may be
fractional, so the correction moves smoothly through New Year instead of
jumping once per calendar year.
"""

from types import MappingProxyType

from .angles import ARCSEC, J2000, JULIAN_YEAR, normalize
from .errors import InvalidInput, require_finite

# Degrees at 2000.0 and annual precession rate in degrees
AYANAMSA = MappingProxyType({
    # Chandra Hari / modern Lahiri: 23.85° at J2000, rate 50.288"/yr
    "lahiri": MappingProxyType({"epoch_value": 23.85045, "rate": 50.2882 * ARCSEC}),
    "raman":  MappingProxyType({"epoch_value": 22.46000, "rate": 50.2388 * ARCSEC}),
    "kp":     MappingProxyType({"epoch_value": 23.86000, "rate": 50.2388 * ARCSEC}),
    "fagan":  MappingProxyType({"epoch_value": 24.74000, "rate": 50.2388 * ARCSEC}),
})

EPOCH_YEAR = 2000.0


def year_from_jd(jd: float) -> float:
    """Fractional Julian year for a Julian Day (2000.0 at J2000)."""
    return EPOCH_YEAR + (require_finite("julian_day", jd) - J2000) / JULIAN_YEAR


def ayanamsa(year: float, system: str = "lahiri") -> float:
    year = require_finite("year", year)
    params = AYANAMSA.get(str(system).lower())
    if params is None:
        raise InvalidInput(f"unknown ayanamsa system {system!r}; "
                           f"expected one of {sorted(AYANAMSA)}", "ayanamsa", system)
    return normalize(params["epoch_value"] + params["rate"] * (year - EPOCH_YEAR))


def lahiri_ayanamsa(year: float) -> float:
    return ayanamsa(year, "lahiri")
