# Panchang Engine - Core modules
from .timekeeping import julian_day, julian_moment, gmst, local_sidereal_time, local_to_utc
from .ayanamsa import AYANAMSA, lahiri_ayanamsa
from .ephemeris import ApproximateEphemeris, PlanetaryLongitudeSet, tropical_positions
from .houses import ascendant, tropical_to_sidereal
from .panchang import classify, compute_tithi, compute_nakshatra, compute_yoga, compute_karana, compute_vara
from .muhurat import MuhuratScorer, suggest_remedies, compare_scores
from .daytime import sunrise_sunset, rahu_kaal, daily_muhurtas

__all__ = [
    "julian_day", "julian_moment", "gmst", "local_sidereal_time", "local_to_utc",
    "AYANAMSA", "lahiri_ayanamsa",
    "ApproximateEphemeris", "PlanetaryLongitudeSet", "tropical_positions",
    "ascendant", "tropical_to_sidereal",
    "classify", "compute_tithi", "compute_nakshatra", "compute_yoga", "compute_karana", "compute_vara",
    "MuhuratScorer", "suggest_remedies", "compare_scores",
    "sunrise_sunset", "rahu_kaal", "daily_muhurtas",
]
