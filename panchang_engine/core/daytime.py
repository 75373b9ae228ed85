"""
daytime.py
==========
Day timings for a place: sunrise / sunset, Rahu Kaal and the thirty daily
muhurtas.

All times are LOCAL decimal hours (e.g. 6.25 = 06:15) for the given
timezone offset. At polar day / polar night sunrise and sunset are None and
no day-based slots exist.

Source: Meeus Ch. 15 (rising and setting), traditional Rahu Kaal table.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .angles import J2000, JULIAN_CENTURY, RAD, cos_deg, normalize, sin_deg
from .ephemeris import mean_obliquity, sun_longitude
from .errors import InvalidInput, check_result, require_latitude, require_longitude, require_range
from .panchang import Quality
from .tables import (
    AUSPICIOUS_MUHURTAS, INAUSPICIOUS_MUHURTAS, MUHURTA_NAMES, MUHURTA_RULING_PLANETS,
    RAHU_KAAL_SLOT, UNSUITABLE_MUHURTA_ACTIVITIES,
)
from .timekeeping import gmst, julian_day

# Standard altitude of the Sun's upper limb at rising, refraction included
SUNRISE_ALTITUDE = -0.8333

MUHURTA_COUNT = 30
MUHURTA_HOURS = 48.0 / 60.0


@dataclass(frozen=True)
class SolarDay:
    sunrise:    Optional[float]
    sunset:     Optional[float]
    solar_noon: float

    @property
    def polar(self) -> bool:
        return self.sunrise is None or self.sunset is None

    @property
    def day_length(self) -> Optional[float]:
        if self.polar:
            return None
        return (self.sunset - self.sunrise) % 24.0


@dataclass(frozen=True)
class TimeSlot:
    number:        int            # 1-30
    name:          str
    start_hour:    float          # local, [0, 24)
    end_hour:      float
    ruling_planet: str
    quality:       Quality
    unsuitable:    Tuple[str, ...]
    in_rahu_kaal:  bool

    def suitable_for(self, activity: str) -> bool:
        return activity.lower() not in self.unsuitable and self.quality != Quality.INAUSPICIOUS


def format_hour(hour: Optional[float]) -> Optional[str]:
    if hour is None:
        return None
    total_min = round((hour % 24.0) * 60) % (24 * 60)
    h, m = divmod(total_min, 60)
    return f"{h:02d}:{m:02d}"


# ---------------------------------------------------------------------------
# Sunrise / Sunset
# ---------------------------------------------------------------------------

def _sun_hour_angle(latitude: float, declination: float,
                    altitude: float = SUNRISE_ALTITUDE) -> Optional[float]:
    """Hour angle of rising/setting. None where the Sun never rises or sets."""
    cos_H = ((sin_deg(altitude) - sin_deg(latitude) * sin_deg(declination))
             / (cos_deg(latitude) * cos_deg(declination)))
    if abs(cos_H) > 1.0:
        return None
    return math.acos(cos_H) * RAD


def sunrise_sunset(year: int, month: int, day: int,
                   latitude: float, longitude: float,
                   timezone_offset: float = 0.0) -> SolarDay:
    """
    Sunrise, sunset and solar noon on a civil date, in local hours.
    timezone_offset: hours ahead of UTC (5.5 for IST).
    """
    latitude = require_latitude(latitude)
    longitude = require_longitude(longitude)
    timezone_offset = require_range("timezone_offset", timezone_offset, -12.0, 14.0)

    jd0 = julian_day(year, month, day)               # 0h UT
    T = (jd0 + 0.5 - J2000) / JULIAN_CENTURY          # solar coordinates at noon
    obliquity = mean_obliquity(jd0 + 0.5)
    sun_lon = sun_longitude(T)

    declination = math.asin(sin_deg(obliquity) * sin_deg(sun_lon)) * RAD
    ra = normalize(math.atan2(cos_deg(obliquity) * sin_deg(sun_lon), cos_deg(sun_lon)) * RAD)

    # Transit (solar noon) as a fraction of the UT day
    m0 = ((ra - longitude - gmst(jd0)) / 360.0) % 1.0
    check_result("sunrise_sunset", m0, latitude=latitude, longitude=longitude, jd=jd0)

    def _local(frac: float) -> float:
        return (frac * 24.0 + timezone_offset) % 24.0

    H0 = None if abs(latitude) >= 90.0 else _sun_hour_angle(latitude, declination)
    if H0 is None:
        return SolarDay(sunrise=None, sunset=None, solar_noon=_local(m0))

    return SolarDay(
        sunrise=_local(m0 - H0 / 360.0),
        sunset=_local(m0 + H0 / 360.0),
        solar_noon=_local(m0),
    )


# ---------------------------------------------------------------------------
# Rahu Kaal
# ---------------------------------------------------------------------------

def _require_weekday(weekday: int) -> int:
    if not isinstance(weekday, int) or not 0 <= weekday <= 6:
        raise InvalidInput(f"weekday must be 0 (Sunday) to 6, got {weekday!r}", "weekday", weekday)
    return weekday


def rahu_kaal(solar_day: SolarDay, weekday: int) -> Optional[Tuple[float, float]]:
    """
    Rahu Kaal = 1/8 of daytime, slot varies by weekday.
    weekday: 0=Sunday … 6=Saturday. Returns (start, end) local hours.
    """
    weekday = _require_weekday(weekday)
    if solar_day.polar:
        return None
    slot_duration = solar_day.day_length / 8.0
    start = solar_day.sunrise + (RAHU_KAAL_SLOT[weekday] - 1) * slot_duration
    return start % 24.0, (start + slot_duration) % 24.0


# ---------------------------------------------------------------------------
# Daily muhurtas
# ---------------------------------------------------------------------------

def _overlaps(start: float, end: float, span: Tuple[float, float]) -> bool:
    # start/end are unwrapped hours from sunrise; Rahu Kaal may wrap midnight
    s, e = span
    if e < s:
        e += 24.0
    for shift in (-24.0, 0.0, 24.0):
        if start < e + shift and end > s + shift:
            return True
    return False


def _slot(index: int, sunrise: float, rk: Optional[Tuple[float, float]]) -> TimeSlot:
    number = index + 1
    start = sunrise + index * MUHURTA_HOURS
    end = start + MUHURTA_HOURS
    if number in AUSPICIOUS_MUHURTAS:
        quality = Quality.AUSPICIOUS
    elif number in INAUSPICIOUS_MUHURTAS:
        quality = Quality.INAUSPICIOUS
    else:
        quality = Quality.NEUTRAL
    return TimeSlot(
        number=number,
        name=MUHURTA_NAMES[index],
        start_hour=start % 24.0,
        end_hour=end % 24.0,
        ruling_planet=MUHURTA_RULING_PLANETS[index % 7],
        quality=quality,
        unsuitable=UNSUITABLE_MUHURTA_ACTIVITIES.get(number, ()),
        in_rahu_kaal=rk is not None and _overlaps(start, end, rk),
    )


def daily_muhurtas(solar_day: SolarDay, weekday: int) -> List[TimeSlot]:
    """Thirty muhurtas of 48 minutes each, starting at sunrise."""
    rk = rahu_kaal(solar_day, weekday)
    if solar_day.polar:
        return []
    return [_slot(i, solar_day.sunrise, rk) for i in range(MUHURTA_COUNT)]


def time_slot_at(solar_day: SolarDay, weekday: int, hour: float) -> Optional[TimeSlot]:
    """The muhurta containing a local clock hour, or None at the poles."""
    hour = require_range("hour", hour, 0.0, 24.0)
    rk = rahu_kaal(solar_day, weekday)
    if solar_day.polar:
        return None
    offset = (hour - solar_day.sunrise) % 24.0
    index = min(int(offset / MUHURTA_HOURS), MUHURTA_COUNT - 1)
    return _slot(index, solar_day.sunrise, rk)
