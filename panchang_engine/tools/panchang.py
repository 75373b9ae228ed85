"""
panchang.py
===========
Daily Panchang and sidereal chart generator.

Orchestrates the timekeeping, ayanamsa, ephemeris, house and Panchang
modules: local civil time → UTC → Julian Day → tropical positions →
sidereal positions and ascendant → Panchang snapshot.

Usage:
    from panchang_engine.tools.panchang import compute_panchang

    snapshot = compute_panchang(
        year=2024, month=2, day=14,
        hour=10, minute=30,
        timezone_offset=5.5,        # IST = UTC+5:30
        latitude=28.6139,           # Delhi
        longitude=77.2090,
        ayanamsa="lahiri",          # or raman, kp, fagan
    )
    snapshot.tithi.name, snapshot.nakshatra.name
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.angles import dms
from ..core.ayanamsa import ayanamsa as ayanamsa_value, year_from_jd
from ..core.daytime import SolarDay, format_hour, rahu_kaal, sunrise_sunset
from ..core.ephemeris import DEFAULT_EPHEMERIS, Ephemeris, PlanetaryLongitudeSet, mean_obliquity
from ..core.errors import require_latitude, require_longitude
from ..core.houses import (
    AscendantResult, ascendant, ascendant_result, midheaven, sidereal_longitude, tropical_to_sidereal,
)
from ..core.panchang import PanchangSnapshot, classify
from ..core.timekeeping import JulianMoment, julian_moment, local_sidereal_time, local_to_utc


@dataclass(frozen=True)
class SiderealChart:
    moment:          JulianMoment
    ayanamsa:        float
    ayanamsa_system: str
    tropical:        PlanetaryLongitudeSet
    sidereal:        PlanetaryLongitudeSet
    lst:             float
    obliquity:       float
    ascendant:       AscendantResult      # sidereal
    midheaven:       float                # sidereal

    def as_dict(self) -> dict:
        return {
            "meta": {
                "julian_day": round(self.moment.julian_day, 6),
                "julian_centuries_j2000": round(self.moment.julian_centuries, 8),
                "ayanamsa_system": self.ayanamsa_system,
                "ayanamsa_value": round(self.ayanamsa, 6),
                "obliquity": round(self.obliquity, 6),
                "lst_degrees": round(self.lst, 6),
            },
            "lagna": {
                "sign": self.ascendant.sign_name,
                "longitude": round(self.ascendant.longitude, 4),
                "degree_formatted": dms(self.ascendant.degree_in_sign),
            },
            "midheaven": round(self.midheaven, 4),
            "planets": {name: round(lon, 4) for name, lon in self.sidereal},
        }


def _positions(year, month, day, hour, minute, second, timezone_offset, ayanamsa, ephemeris):
    utc = local_to_utc(year, month, day, hour, minute, second, timezone_offset)
    moment = julian_moment(*utc)
    ay = ayanamsa_value(year_from_jd(moment.julian_day), ayanamsa)
    tropical = (ephemeris or DEFAULT_EPHEMERIS).tropical_positions(moment.julian_day)
    return moment, ay, tropical, tropical_to_sidereal(tropical, ay)


def compute_chart(year: int, month: int, day: int,
                  hour: int = 0, minute: int = 0, second: float = 0.0,
                  timezone_offset: float = 0.0,
                  latitude: float = 0.0, longitude: float = 0.0,
                  ayanamsa: str = "lahiri",
                  ephemeris: Optional[Ephemeris] = None) -> SiderealChart:
    """
    Sidereal positions and ascendant for a local civil time and place.

    Args:
        year, month, day, hour, minute, second: LOCAL civil time
        timezone_offset: Hours ahead of UTC (e.g. 5.5 for India, -5 for EST)
        latitude: degrees, positive North; longitude: degrees, positive East
        ayanamsa: 'lahiri', 'raman', 'kp', 'fagan'
        ephemeris: any object with ``tropical_positions(jd)``
    """
    latitude = require_latitude(latitude)
    moment, ay, tropical, sidereal = _positions(year, month, day, hour, minute, second,
                                                timezone_offset, ayanamsa, ephemeris)
    jd = moment.julian_day

    lst = local_sidereal_time(jd, longitude)
    obliquity = mean_obliquity(jd)
    asc = sidereal_longitude(ascendant(lst, latitude, obliquity), ay)

    return SiderealChart(
        moment=moment,
        ayanamsa=ay,
        ayanamsa_system=ayanamsa.lower(),
        tropical=tropical,
        sidereal=sidereal,
        lst=lst,
        obliquity=obliquity,
        ascendant=ascendant_result(asc),
        midheaven=sidereal_longitude(midheaven(lst), ay),
    )


def compute_panchang(year: int, month: int, day: int,
                     hour: int = 0, minute: int = 0, second: float = 0.0,
                     timezone_offset: float = 0.0,
                     latitude: float = 0.0, longitude: float = 0.0,
                     ayanamsa: str = "lahiri",
                     ephemeris: Optional[Ephemeris] = None) -> PanchangSnapshot:
    """
    Panchang for a local civil time and place. Vara follows the LOCAL date,
    the other limbs the sidereal Sun and Moon at that instant.
    """
    require_latitude(latitude)
    require_longitude(longitude)
    moment, ay, _tropical, sidereal = _positions(year, month, day, hour, minute, second,
                                                 timezone_offset, ayanamsa, ephemeris)
    return classify(sidereal.sun, sidereal.moon, date(year, month, day),
                    planets=sidereal, julian_day=moment.julian_day, ayanamsa=ay)


def day_timings(year: int, month: int, day: int,
                latitude: float, longitude: float,
                timezone_offset: float = 0.0) -> dict:
    """Sunrise, sunset and Rahu Kaal in local HH:MM."""
    solar_day: SolarDay = sunrise_sunset(year, month, day, latitude, longitude, timezone_offset)
    weekday = (date(year, month, day).weekday() + 1) % 7    # 0 = Sunday
    rk = rahu_kaal(solar_day, weekday)
    return {
        "sunrise": format_hour(solar_day.sunrise),
        "sunset": format_hour(solar_day.sunset),
        "solar_noon": format_hour(solar_day.solar_noon),
        "rahu_kaal": {"start": format_hour(rk[0]), "end": format_hour(rk[1])} if rk else None,
        "polar": solar_day.polar,
    }
