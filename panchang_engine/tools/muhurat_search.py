"""
muhurat_search.py
=================
Search a date range for auspicious windows (muhurats) for an activity.

For every civil date in the range the Panchang is computed at the preferred
local time, scored for the activity and kept if it meets ``min_score``. A
date that fails (bad input, arithmetic fault) is logged and skipped; it does
not abort the scan.

Usage:
    from datetime import date
    from panchang_engine.tools.muhurat_search import find_windows_in_range

    windows = find_windows_in_range(
        date(2024, 11, 1), date(2024, 12, 31),
        {"activity": "marriage", "latitude": 19.076, "longitude": 72.8777,
         "timezone_offset": 5.5, "hour": 10, "min_score": 0.6},
    )
    for w in windows:
        print(w.date, w.score.total_score, w.score.grade)
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.daytime import TimeSlot, sunrise_sunset, time_slot_at
from ..core.ephemeris import Ephemeris
from ..core.errors import ComputationFailure, InvalidInput
from ..core.muhurat import MuhuratScore, MuhuratScorer
from ..core.panchang import PanchangSnapshot, Quality
from ..core.tables import NEW_MOON_TITHI, TITHI_NAMES
from .panchang import compute_panchang

log = logging.getLogger(__name__)

# Delhi
DEFAULT_LATITUDE = 28.6139
DEFAULT_LONGITUDE = 77.2090

VALIDATION_PASS_RATE = 0.7


# ── Preferences ────────────────────────────────────────────────

class SearchPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity:        str   = Field("general", min_length=1)
    latitude:        float = Field(DEFAULT_LATITUDE,  ge=-90,  le=90)
    longitude:       float = Field(DEFAULT_LONGITUDE, ge=-180, le=180)
    timezone_offset: float = Field(5.5, ge=-12, le=14)
    hour:            int   = Field(12,  ge=0,   le=23)
    minute:          int   = Field(0,   ge=0,   le=59)
    min_score:       float = Field(0.7, ge=0.0, le=1.0)
    ayanamsa:        str   = Field("lahiri", pattern="^(lahiri|raman|kp|fagan)$")
    use_time_slot:   bool  = True      # score the muhurta (and Rahu Kaal) at hour:minute


PreferencesLike = Union[SearchPreferences, Mapping, None]


def search_preferences(preferences: PreferencesLike = None, **overrides) -> SearchPreferences:
    """Build SearchPreferences from a model, a mapping or keywords."""
    if isinstance(preferences, SearchPreferences):
        data = preferences.model_dump()
    else:
        data = dict(preferences or {})
    data.update(overrides)
    try:
        return SearchPreferences(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or None
        raise InvalidInput(f"invalid search preferences: {first.get('msg')}",
                           field, first.get("input")) from e


# ── Results ────────────────────────────────────────────────────

@dataclass(frozen=True)
class MuhuratWindow:
    date:      date
    snapshot:  PanchangSnapshot
    score:     MuhuratScore
    time_slot: Optional[TimeSlot] = None
    notes:     Tuple[str, ...] = ()

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "panchang": self.snapshot.as_dict(),
            "score": self.score.as_dict(),
            "muhurta": self.time_slot.name if self.time_slot else None,
            "notes": list(self.notes),
        }


Annotator = Callable[[PanchangSnapshot, MuhuratScore], List[str]]


def _evaluate_date(day: date, prefs: SearchPreferences, scorer: MuhuratScorer,
                   ephemeris: Optional[Ephemeris]) -> Tuple[PanchangSnapshot, Optional[TimeSlot], MuhuratScore]:
    snapshot = compute_panchang(
        day.year, day.month, day.day, prefs.hour, prefs.minute, 0.0,
        timezone_offset=prefs.timezone_offset,
        latitude=prefs.latitude, longitude=prefs.longitude,
        ayanamsa=prefs.ayanamsa, ephemeris=ephemeris,
    )
    slot = None
    if prefs.use_time_slot:
        solar_day = sunrise_sunset(day.year, day.month, day.day,
                                   prefs.latitude, prefs.longitude, prefs.timezone_offset)
        slot = time_slot_at(solar_day, snapshot.vara.number - 1, prefs.hour + prefs.minute / 60.0)
    return snapshot, slot, scorer.score(snapshot, prefs.activity, slot)


def _scan(start: date, end: date, prefs: SearchPreferences, scorer: MuhuratScorer,
          ephemeris: Optional[Ephemeris], annotate: Optional[Annotator]) -> Iterator[MuhuratWindow]:
    day = start
    while day <= end:
        try:
            snapshot, slot, score = _evaluate_date(day, prefs, scorer, ephemeris)
        except (InvalidInput, ComputationFailure) as e:
            log.warning("Skipping %s during muhurat search: %s", day.isoformat(), e)
        else:
            if score.total_score >= prefs.min_score:
                notes = tuple(annotate(snapshot, score)) if annotate else ()
                yield MuhuratWindow(date=day, snapshot=snapshot, score=score,
                                    time_slot=slot, notes=notes)
        day += timedelta(days=1)


def iter_windows(start: date, end: date, preferences: PreferencesLike = None,
                 scorer: Optional[MuhuratScorer] = None,
                 ephemeris: Optional[Ephemeris] = None,
                 annotate: Optional[Annotator] = None) -> Iterator[MuhuratWindow]:
    """
    Iterator over qualifying windows in date order, one date at a time.
    Stop iterating at any point to abandon the scan.

    Preferences and the date range are checked here, before the first date
    is evaluated.
    """
    prefs = search_preferences(preferences)
    if end < start:
        raise InvalidInput(f"end date {end} is before start date {start}", "end", end)
    return _scan(start, end, prefs, scorer or MuhuratScorer(), ephemeris, annotate)


def find_windows_in_range(start: date, end: date, preferences: PreferencesLike = None,
                          scorer: Optional[MuhuratScorer] = None,
                          ephemeris: Optional[Ephemeris] = None,
                          annotate: Optional[Annotator] = None) -> List[MuhuratWindow]:
    """All qualifying windows, best score first (ties: earlier date first)."""
    windows = list(iter_windows(start, end, preferences, scorer, ephemeris, annotate))
    windows.sort(key=lambda w: (-w.score.total_score, w.date))
    log.info("Muhurat search %s..%s: %d window(s)", start, end, len(windows))
    return windows


# ── Marriage (Vivaha) muhurat ──────────────────────────────────

@dataclass(frozen=True)
class MarriageValidation:
    is_valid:        bool
    checks:          dict
    score:           float
    recommendations: Tuple[str, ...]


class MarriageMuhuratEvaluator:
    """
    Marriage-specific layer over the scorer: ceremony recommendations, the
    five traditional checks and a date-range search.
    """

    activity = "marriage"
    avoided_tithis = (NEW_MOON_TITHI, TITHI_NAMES[-1])     # Amavasya, Purnima

    def __init__(self, scorer: Optional[MuhuratScorer] = None,
                 ephemeris: Optional[Ephemeris] = None):
        self.scorer = scorer or MuhuratScorer()
        self.ephemeris = ephemeris
        _, self.rules = self.scorer.rules.for_activity(self.activity)

    def evaluate(self, snapshot: PanchangSnapshot, time_slot: Optional[TimeSlot] = None) -> MuhuratScore:
        return self.scorer.score(snapshot, self.activity, time_slot)

    def recommendations(self, snapshot: PanchangSnapshot, score: MuhuratScore) -> List[str]:
        notes = []
        if score.total_score >= 0.7:
            notes.append("Ideal time for marriage ceremony")
            notes.append("Perform traditional Vedic marriage rituals")
        if snapshot.nakshatra.gand_mula:
            notes.append("WARNING: Gand Mula Nakshatra, avoid marriage")
            notes.append("Perform special pujas and remedies before marriage")
        if snapshot.tithi.quality != Quality.AUSPICIOUS:
            notes.append("Consider performing Ganesh Puja before ceremony")
        if snapshot.nakshatra.quality != Quality.AUSPICIOUS:
            notes.append(f"Chant protective mantras for {snapshot.nakshatra.lord}, the nakshatra lord")
        notes.append("Consult with experienced priest or astrologer")
        notes.append("Consider gotra matching and kundli compatibility")
        return notes

    def validate(self, snapshot: PanchangSnapshot,
                 time_slot: Optional[TimeSlot] = None) -> MarriageValidation:
        checks = {
            "gand_mula":   not snapshot.nakshatra.gand_mula,
            "rahu_kaal":   not (time_slot is not None and time_slot.in_rahu_kaal),
            "tithi":       snapshot.tithi.quality == Quality.AUSPICIOUS,
            "weekday":     snapshot.vara.number in self.rules.varas.ideal,
            "lunar_phase": snapshot.tithi.name not in self.avoided_tithis,
        }
        messages = {
            "gand_mula":   "Avoid Gand Mula Nakshatra, highly inauspicious for marriage",
            "rahu_kaal":   "Avoid Rahu Kaal period",
            "tithi":       "Tithi is not ideal, consider performing additional pujas",
            "weekday":     "Weekday is not traditionally favorable for marriage",
            "lunar_phase": "Avoid marriage during Amavasya or Purnima",
        }
        passed = sum(1 for ok in checks.values() if ok)
        return MarriageValidation(
            is_valid=passed >= len(checks) * VALIDATION_PASS_RATE,
            checks=checks,
            score=passed / len(checks),
            recommendations=tuple(messages[name] for name, ok in checks.items() if not ok),
        )

    def find_dates(self, start: date, end: date,
                   preferences: PreferencesLike = None) -> List[MuhuratWindow]:
        prefs = search_preferences(preferences, activity=self.activity)
        return find_windows_in_range(start, end, prefs, self.scorer, self.ephemeris,
                                     annotate=self.recommendations)
