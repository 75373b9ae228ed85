"""
demo.py
=======
Demonstration of the Panchang Engine.
Run: python -m panchang_engine.demo

Prints the Panchang for a sample day, scores it for every activity and
searches a month for marriage muhurats.
"""

import logging
import os
from datetime import date

from panchang_engine import MarriageMuhuratEvaluator, MuhuratScorer, compute_chart, compute_panchang, day_timings
from panchang_engine.core.angles import dms
from panchang_engine.core.muhurat import suggest_remedies

ACTIVITIES = ("marriage", "business", "travel", "education", "health", "general")


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def run_demo():
    print("=" * 60)
    print("   PANCHANG ENGINE: SAMPLE DAY")
    print("=" * 60)

    params = {
        "year": 2024, "month": 2, "day": 14,
        "hour": 10, "minute": 30, "second": 0,
        "timezone_offset": 5.5,        # IST
        "latitude": 28.6139,           # Delhi
        "longitude": 77.2090,
        "ayanamsa": "lahiri",
    }

    print(f"\n  Date        : {params['year']}-{params['month']:02d}-{params['day']:02d}")
    print(f"  Time        : {params['hour']:02d}:{params['minute']:02d} IST (UTC+5:30)")
    print(f"  Location    : Delhi, India ({params['latitude']}°N, {params['longitude']}°E)")
    print(f"  Ayanamsa    : {params['ayanamsa'].title()}")

    chart = compute_chart(**params)
    print_section("LAGNA (ASCENDANT)")
    print(f"  Sign        : {chart.ascendant.sign_name}")
    print(f"  Degree      : {dms(chart.ascendant.degree_in_sign)}")
    print(f"  Ayanamsa    : {chart.ayanamsa:.4f}°")

    print_section("SIDEREAL POSITIONS")
    for name, lon in chart.sidereal:
        print(f"  {name:<10} {lon:9.4f}°")

    p = compute_panchang(**params)
    print_section("PANCHANG")
    print(f"  Vara (Day)    : {p.vara.name} ({p.vara.sanskrit_name})")
    print(f"  Tithi         : {p.tithi.name} ({p.tithi.paksha} Paksha)"
          f", {p.tithi.progress * 100:.1f}% elapsed, ~{p.tithi.hours_remaining:.1f} h left")
    print(f"  Nakshatra     : {p.nakshatra.name} (Pada {p.nakshatra.pada}, lord {p.nakshatra.lord})")
    print(f"  Yoga          : {p.yoga.name}")
    print(f"  Karana        : {p.karana.name} ({p.karana.type})")
    print(f"  Lunar phase   : {p.lunar_phase}")

    timings = day_timings(params["year"], params["month"], params["day"],
                          params["latitude"], params["longitude"], params["timezone_offset"])
    print(f"  Sunrise       : {timings['sunrise']}")
    print(f"  Sunset        : {timings['sunset']}")
    rk = timings["rahu_kaal"] or {}
    print(f"  Rahu Kaal     : {rk.get('start', '?')} to {rk.get('end', '?')}")

    print_section("MUHURAT SCORES")
    scorer = MuhuratScorer()
    for activity in ACTIVITIES:
        s = scorer.score(p, activity)
        print(f"  {activity:<10} {s.total_score:5.2f}  {s.grade}")
    print("\n  Remedies:")
    for line in suggest_remedies(p):
        print(f"   - {line}")

    print_section("MARRIAGE MUHURATS, MARCH 2024")
    evaluator = MarriageMuhuratEvaluator(scorer)
    windows = evaluator.find_dates(date(2024, 3, 1), date(2024, 3, 31),
                                   {"min_score": 0.6, "hour": 10, "timezone_offset": 5.5})
    if not windows:
        print("  (no dates above the threshold)")
    for w in windows[:5]:
        print(f"  {w.date}  {w.score.total_score:.2f}  {w.score.grade:<10} "
              f"{w.snapshot.tithi.name}, {w.snapshot.nakshatra.name}")

    print("\n")


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    run_demo()
