"""
Panchang Engine
===============
Vedic astronomical primitives, daily Panchang and muhurat (auspicious
timing) scoring.

Quick start:
    from datetime import date
    from panchang_engine import compute_panchang, MuhuratScorer, find_windows_in_range

    snapshot = compute_panchang(
        year=2024, month=2, day=14,
        hour=10, minute=30, second=0,
        timezone_offset=5.5,
        latitude=28.6139,
        longitude=77.2090,
    )
    score = MuhuratScorer().score(snapshot, "marriage")

    windows = find_windows_in_range(date(2024, 11, 1), date(2024, 11, 30),
                                    {"activity": "business", "min_score": 0.6})
"""

from .core.errors import ComputationFailure, ConfigurationError, InvalidInput, PanchangError
from .core.muhurat import MuhuratScore, MuhuratScorer
from .core.panchang import PanchangSnapshot, classify
from .core.rules import RuleBook, load_rulebook
from .tools.muhurat_search import MarriageMuhuratEvaluator, SearchPreferences, find_windows_in_range, iter_windows
from .tools.panchang import compute_chart, compute_panchang, day_timings

__version__ = "1.0.0"
__all__ = [
    "compute_panchang", "compute_chart", "day_timings", "classify",
    "MuhuratScorer", "MuhuratScore", "PanchangSnapshot",
    "find_windows_in_range", "iter_windows", "SearchPreferences", "MarriageMuhuratEvaluator",
    "RuleBook", "load_rulebook",
    "PanchangError", "InvalidInput", "ComputationFailure", "ConfigurationError",
]
