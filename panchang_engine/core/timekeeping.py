"""
timekeeping.py
==============
Civil date-time → Julian Day, Julian centuries, Greenwich and Local
Sidereal Time.

Source: Meeus, "Astronomical Algorithms" 2nd ed., Ch. 7 (Julian Day) and
Ch. 12 (sidereal time). Gregorian calendar only; no proleptic switching.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Tuple

from .angles import J2000, JULIAN_CENTURY, normalize
from .errors import InvalidInput, require_finite, require_longitude, require_range

MIN_YEAR = 1800
MAX_YEAR = 2200


@dataclass(frozen=True)
class JulianMoment:
    julian_day: float
    julian_centuries: float


# ── Validation ─────────────────────────────────────────────────

def validate_civil(year: int, month: int, day: int,
                   hour: int = 0, minute: int = 0, second: float = 0.0) -> None:
    """
    Reject impossible civil date-times. Nothing is wrapped: hour=24,
    minute=60, Feb 30 and friends raise InvalidInput.
    """
    for name, value in (("year", year), ("month", month), ("day", day),
                        ("hour", hour), ("minute", minute)):
        if isinstance(value, bool) or int(require_finite(name, value)) != value:
            raise InvalidInput(f"{name} must be an integer, got {value!r}", name, value)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidInput(f"year must be within [{MIN_YEAR}, {MAX_YEAR}], got {year}",
                           "year", year)
    require_range("hour", hour, 0, 23)
    require_range("minute", minute, 0, 59)
    second = require_finite("second", second)
    if not 0.0 <= second < 60.0:
        raise InvalidInput(f"second must be within [0, 60), got {second}", "second", second)
    try:
        datetime(int(year), int(month), int(day))
    except ValueError as e:
        raise InvalidInput(f"invalid date {year}-{month}-{day}: {e}", "day", day) from e


# ── Julian Day ─────────────────────────────────────────────────

def julian_day(year: int, month: int, day: int,
               hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """Meeus Ch. 7. Input is UTC."""
    validate_civil(year, month, day, hour, minute, second)
    decimal_day = day + (hour + minute / 60.0 + second / 3600.0) / 24.0
    if month <= 2:
        year -= 1
        month += 12
    A = year // 100
    B = 2 - A + A // 4
    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + decimal_day + B - 1524.5


def julian_centuries(jd: float) -> float:
    jd = require_finite("julian_day", jd)
    return (jd - J2000) / JULIAN_CENTURY


def julian_moment(year: int, month: int, day: int,
                  hour: int = 0, minute: int = 0, second: float = 0.0) -> JulianMoment:
    jd = julian_day(year, month, day, hour, minute, second)
    return JulianMoment(julian_day=jd, julian_centuries=julian_centuries(jd))


# ── Sidereal time ──────────────────────────────────────────────

def gmst(jd: float) -> float:
    """Greenwich Mean Sidereal Time in degrees. Meeus Ch. 12, Eq. 12.4."""
    T = julian_centuries(jd)
    theta = (280.46061837
             + 360.98564736629 * (jd - J2000)
             + 0.000387933 * T * T
             - T * T * T / 38710000.0)
    return normalize(theta)


def lst(gmst_deg: float, longitude: float) -> float:
    """Local Sidereal Time in degrees. longitude: positive East."""
    gmst_deg = require_finite("gmst", gmst_deg)
    return normalize(gmst_deg + require_longitude(longitude))


def local_sidereal_time(jd: float, longitude: float) -> float:
    return lst(gmst(jd), longitude)


# ── Local civil time → UTC ─────────────────────────────────────

def local_to_utc(year: int, month: int, day: int,
                 hour: int = 0, minute: int = 0, second: float = 0.0,
                 timezone_offset: float = 0.0) -> Tuple[int, int, int, int, int, float]:
    """
    Shift a local civil time by ``timezone_offset`` hours (e.g. 5.5 for IST)
    to UTC, rolling day, month and year boundaries.
    """
    validate_civil(year, month, day, hour, minute, second)
    timezone_offset = require_range("timezone_offset", timezone_offset, -12.0, 14.0)
    whole = int(second)
    local = datetime(year, month, day, hour, minute, whole)
    utc = local - timedelta(hours=timezone_offset)
    return utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second + (second - whole)
