"""
panchang.py
===========
Daily Panchang (Hindu almanac) classification.

Five limbs of Panchang, from sidereal Sun/Moon longitudes:
  1. Vara      - Day of week (from the civil date)
  2. Tithi     - Lunar day (1-30), 12° of Moon-Sun elongation each
  3. Nakshatra - Lunar mansion (1-27), 13°20' each, 4 padas
  4. Yoga      - Luni-solar yoga (1-27) from Sun + Moon
  5. Karana    - Half lunar day (1-60), 6° each

Inputs are assumed to be validated sidereal longitudes; nothing here
re-validates them. Every element carries a baseline quality that does not
depend on the activity being planned.
"""

import enum
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .angles import angular_distance, normalize
from .ephemeris import PlanetaryLongitudeSet
from .tables import (
    AUSPICIOUS_TITHIS, INAUSPICIOUS_TITHIS, TITHI_NAMES, NEW_MOON_TITHI, SHUKLA, KRISHNA,
    NAKSHATRAS, NAKSHATRA_LORDS, GAND_MULA_NAKSHATRAS,
    YOGAS, INAUSPICIOUS_YOGAS, NEUTRAL_YOGAS,
    KIMSTUGHNA, ROTATING_KARANAS, INAUSPICIOUS_KARANAS, NEUTRAL_KARANAS,
    VARAS,
)

NAKSHATRA_SPAN = 360.0 / 27.0          # 13°20'
PADA_SPAN      = NAKSHATRA_SPAN / 4.0  # 3°20'
TITHI_SPAN     = 12.0
KARANA_SPAN    = 6.0
KARANA_SLOTS   = 60

# Mean daily gain of the Moon on the Sun, degrees
MEAN_ELONGATION_RATE = 12.190749


class Quality(str, enum.Enum):
    AUSPICIOUS = "auspicious"
    NEUTRAL = "neutral"
    INAUSPICIOUS = "inauspicious"


def _quality(auspicious: bool, inauspicious: bool = False) -> Quality:
    if auspicious:
        return Quality.AUSPICIOUS
    if inauspicious:
        return Quality.INAUSPICIOUS
    return Quality.NEUTRAL


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Tithi:
    number:          int        # 1-30
    name:            str
    paksha:          str        # Shukla (waxing) | Krishna (waning)
    progress:        float      # fraction of the tithi elapsed, [0, 1)
    quality:         Quality
    hours_remaining: float

    @property
    def number_in_paksha(self) -> int:
        return self.number if self.number <= 15 else self.number - 15

    @property
    def is_waxing(self) -> bool:
        return self.paksha == SHUKLA


@dataclass(frozen=True)
class Nakshatra:
    number:                 int   # 1-27
    name:                   str
    pada:                   int   # 1-4
    lord:                   str
    degrees_into_nakshatra: float
    degrees_into_pada:      float
    deity:                  str
    symbol:                 str
    gana:                   str
    temperament:            str
    favorable:              Tuple[str, ...]
    unfavorable:            Tuple[str, ...]
    gand_mula:              bool
    quality:                Quality


@dataclass(frozen=True)
class Yoga:
    number:  int   # 1-27
    name:    str
    quality: Quality


@dataclass(frozen=True)
class Karana:
    number:  int   # 1-60
    name:    str
    type:    str   # Fixed | Moveable
    quality: Quality


@dataclass(frozen=True)
class Vara:
    number:        int   # 1-7, Sunday = 1
    name:          str
    sanskrit_name: str
    lord:          str
    quality:       Quality


@dataclass(frozen=True)
class PanchangSnapshot:
    tithi:          Tithi
    nakshatra:      Nakshatra
    yoga:           Yoga
    karana:         Karana
    vara:           Vara
    sun_longitude:  float
    moon_longitude: float
    julian_day:     Optional[float] = None
    ayanamsa:       Optional[float] = None
    planets:        Optional[PlanetaryLongitudeSet] = None   # sidereal

    @property
    def lunar_phase(self) -> str:
        return lunar_phase(self.sun_longitude, self.moon_longitude)

    def as_dict(self) -> dict:
        return {
            "vara": self.vara.name,
            "tithi": {
                "index": self.tithi.number,
                "name": self.tithi.name,
                "paksha": self.tithi.paksha,
                "elapsed_pct": round(self.tithi.progress * 100, 1),
            },
            "nakshatra": {
                "index": self.nakshatra.number,
                "name": self.nakshatra.name,
                "pada": self.nakshatra.pada,
                "lord": self.nakshatra.lord,
            },
            "yoga": {"index": self.yoga.number, "name": self.yoga.name},
            "karana": {"number": self.karana.number, "name": self.karana.name,
                       "type": self.karana.type},
            "sun_longitude": round(self.sun_longitude, 4),
            "moon_longitude": round(self.moon_longitude, 4),
            "lunar_phase": self.lunar_phase,
        }


# ---------------------------------------------------------------------------
# Core Panchang computation
# ---------------------------------------------------------------------------

def compute_tithi(sun_sid: float, moon_sid: float) -> Tithi:
    """
    Tithi = difference between Moon and Sun longitudes / 12°
    Each tithi = 12° of separation. 30 tithis per lunar month.
    """
    diff = normalize(moon_sid - sun_sid)
    idx = min(int(diff / TITHI_SPAN), 29)   # 0-based, 0–29
    number = idx + 1
    paksha = SHUKLA if number <= 15 else KRISHNA
    in_paksha = number if number <= 15 else number - 15
    name = TITHI_NAMES[in_paksha - 1]
    if number == 30:
        name = NEW_MOON_TITHI

    elapsed = max(diff - idx * TITHI_SPAN, 0.0)
    return Tithi(
        number=number,
        name=name,
        paksha=paksha,
        progress=min(elapsed / TITHI_SPAN, math.nextafter(1.0, 0.0)),
        quality=_quality(in_paksha in AUSPICIOUS_TITHIS[paksha],
                         in_paksha in INAUSPICIOUS_TITHIS[paksha]),
        hours_remaining=(TITHI_SPAN - elapsed) / MEAN_ELONGATION_RATE * 24.0,
    )


def compute_nakshatra(moon_sid: float) -> Nakshatra:
    """
    Nakshatra of Moon. Each nakshatra = 360/27 = 13°20' arc, four padas
    of 3°20'. A longitude exactly on a boundary belongs to the later one.
    """
    moon_sid = normalize(moon_sid)
    idx = min(int(moon_sid / NAKSHATRA_SPAN), 26)
    into = max(moon_sid - idx * NAKSHATRA_SPAN, 0.0)
    pada_idx = min(int(into / PADA_SPAN), 3)
    info = NAKSHATRAS[idx]
    gand_mula = (idx + 1) in GAND_MULA_NAKSHATRAS

    return Nakshatra(
        number=idx + 1,
        name=info.name,
        pada=pada_idx + 1,
        lord=NAKSHATRA_LORDS[idx % 9],
        degrees_into_nakshatra=into,
        degrees_into_pada=max(into - pada_idx * PADA_SPAN, 0.0),
        deity=info.deity,
        symbol=info.symbol,
        gana=info.gana,
        temperament=info.temperament,
        favorable=info.favorable,
        unfavorable=info.unfavorable,
        gand_mula=gand_mula,
        quality=_quality(info.auspicious and not gand_mula, True),
    )


def compute_yoga(sun_sid: float, moon_sid: float) -> Yoga:
    """
    Yoga = (Sun longitude + Moon longitude) / (360/27)
    27 yogas, each 13°20'
    """
    combined = normalize(sun_sid + moon_sid)
    idx = min(int(combined / NAKSHATRA_SPAN), 26)
    number = idx + 1
    return Yoga(
        number=number,
        name=YOGAS[idx],
        quality=_quality(number not in INAUSPICIOUS_YOGAS and number not in NEUTRAL_YOGAS,
                         number in INAUSPICIOUS_YOGAS),
    )


def compute_karana(sun_sid: float, moon_sid: float) -> Karana:
    """
    Karana = half-tithi. Sixty per lunar month.

    Kimstughna is pinned to the first half-tithi (0°–6°) and the last one
    (354°–360°). Those two slots are looked up before the rotating cycle;
    the 58 slots in between take the ten rotating names in order.
    """
    diff = normalize(moon_sid - sun_sid)
    slot = min(int(diff / KARANA_SPAN), KARANA_SLOTS - 1)   # 0–59

    if slot == 0 or slot == KARANA_SLOTS - 1:
        name, kind = KIMSTUGHNA, "Fixed"
    else:
        name, kind = ROTATING_KARANAS[(slot - 1) % len(ROTATING_KARANAS)], "Moveable"

    return Karana(
        number=slot + 1,
        name=name,
        type=kind,
        quality=_quality(name not in INAUSPICIOUS_KARANAS and name not in NEUTRAL_KARANAS,
                         name in INAUSPICIOUS_KARANAS),
    )


def compute_vara(civil_date: date) -> Vara:
    """Weekday of the local civil date. Independent of any longitude."""
    idx = (civil_date.weekday() + 1) % 7    # date.weekday(): Monday = 0
    info = VARAS[idx]
    return Vara(
        number=idx + 1,
        name=info.name,
        sanskrit_name=info.sanskrit_name,
        lord=info.lord,
        quality=_quality(info.auspicious, not info.auspicious),
    )


def lunar_phase(sun_sid: float, moon_sid: float) -> str:
    """Eight-way phase name from the Moon's elongation."""
    elong = normalize(moon_sid - sun_sid)
    phases = ("New Moon", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
              "Full Moon", "Waning Gibbous", "Last Quarter", "Waning Crescent")
    return phases[int(normalize(elong + 22.5) // 45.0) % 8]


def is_combust(planet_sid: float, sun_sid: float, orb: float) -> bool:
    return angular_distance(planet_sid, sun_sid) <= orb


# ---------------------------------------------------------------------------
# Full Panchang
# ---------------------------------------------------------------------------

def classify(sun_sid: float, moon_sid: float, civil_date: date,
             planets: Optional[PlanetaryLongitudeSet] = None,
             julian_day: Optional[float] = None,
             ayanamsa: Optional[float] = None) -> PanchangSnapshot:
    """Build the five Panchang limbs from sidereal Sun and Moon longitudes."""
    sun_sid = normalize(sun_sid)
    moon_sid = normalize(moon_sid)
    return PanchangSnapshot(
        tithi=compute_tithi(sun_sid, moon_sid),
        nakshatra=compute_nakshatra(moon_sid),
        yoga=compute_yoga(sun_sid, moon_sid),
        karana=compute_karana(sun_sid, moon_sid),
        vara=compute_vara(civil_date),
        sun_longitude=sun_sid,
        moon_longitude=moon_sid,
        julian_day=julian_day,
        ayanamsa=ayanamsa,
        planets=planets,
    )
