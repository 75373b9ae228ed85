"""
muhurat.py
==========
Muhurat (auspicious timing) scoring.

Each Panchang element is scored in [0, 1] for the activity being planned:

    ideal for the activity        -> factor_scores.ideal   (1.0)
    to be avoided for it          -> factor_scores.avoid   (0.2)
    otherwise, baseline quality   -> auspicious / neutral / inauspicious

The seven factor scores are combined with fixed weights (sum 1.0) into a
base score. Hard penalties are multiplied in afterwards:

    Gand Mula nakshatra           x 0.3
    time slot inside Rahu Kaal    x 0.7

Weights, factor scores, penalties and activity rules come from the
RuleBook (see rules.py).
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Optional, Tuple, Union

from .daytime import TimeSlot
from .panchang import PanchangSnapshot, Quality, is_combust
from .rules import FACTORS, ActivityRules, RuleBook, default_rulebook

log = logging.getLogger(__name__)

IDEAL = "ideal"
AVOID = "avoid"

STRENGTH_LABELS = MappingProxyType({
    "tithi":     "Auspicious Tithi",
    "nakshatra": "Beneficial Nakshatra",
    "yoga":      "Favorable Yoga",
    "karana":    "Good Karana",
    "vara":      "Auspicious Day",
})
WEAKNESS_LABELS = MappingProxyType({
    "tithi":     "Challenging Tithi",
    "nakshatra": "Difficult Nakshatra",
    "yoga":      "Unfavorable Yoga",
    "karana":    "Inauspicious Karana",
    "vara":      "Challenging Day",
})


@dataclass(frozen=True)
class MuhuratScore:
    total_score:      float
    base_score:       float               # weighted sum before penalties
    component_scores: Dict[str, float]
    grade:            str
    recommendation:   str
    strengths:        Tuple[str, ...]
    weaknesses:       Tuple[str, ...]
    penalties:        Tuple[str, ...]
    activity:         str
    rule_set:         str                 # activity rules actually applied

    def as_dict(self) -> dict:
        return {
            "total_score": round(self.total_score, 4),
            "base_score": round(self.base_score, 4),
            "component_scores": {k: round(v, 4) for k, v in self.component_scores.items()},
            "grade": self.grade,
            "recommendation": self.recommendation,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "penalties": list(self.penalties),
            "activity": self.activity,
            "rule_set": self.rule_set,
        }


def recommendation(score: float, activity: str) -> str:
    if score >= 0.8:
        return f"Excellent time for {activity}. Proceed with confidence."
    if score >= 0.6:
        return f"Good time for {activity}. Generally favorable."
    if score >= 0.4:
        return f"Fair time for {activity}. Consider alternatives if possible."
    return f"Inauspicious time for {activity}. Avoid if possible or perform remedies."


def _verdict(value: Union[int, str], ideal: FrozenSet, avoid: FrozenSet, quality: Quality) -> str:
    if value in ideal:
        return IDEAL
    if value in avoid:
        return AVOID
    return quality.value


class MuhuratScorer:
    """
    Scores a PanchangSnapshot for an activity.

        scorer = MuhuratScorer()
        result = scorer.score(snapshot, "marriage")
        result.total_score, result.grade
    """

    def __init__(self, rules: Optional[RuleBook] = None):
        self.rules = rules if rules is not None else default_rulebook()

    # ── Factors ─────────────────────────────────────────────────

    def _verdicts(self, p: PanchangSnapshot, rules: ActivityRules) -> Dict[str, str]:
        return {
            "tithi":     _verdict(p.tithi.number, rules.tithis.ideal, rules.tithis.avoid,
                                  p.tithi.quality),
            "nakshatra": _verdict(p.nakshatra.number, rules.nakshatras.ideal,
                                  rules.nakshatras.avoid, p.nakshatra.quality),
            "yoga":      _verdict(p.yoga.number, rules.yogas.ideal, rules.yogas.avoid,
                                  p.yoga.quality),
            "karana":    _verdict(p.karana.name, rules.karanas.ideal, rules.karanas.avoid,
                                  p.karana.quality),
            "vara":      _verdict(p.vara.number, rules.varas.ideal, rules.varas.avoid,
                                  p.vara.quality),
        }

    def _time_slot_score(self, slot: Optional[TimeSlot], rule_set: str) -> float:
        if slot is None:
            return self.rules.muhurat_default
        if rule_set in slot.unsuitable:
            return self.rules.factor_scores.avoid
        return getattr(self.rules.factor_scores, slot.quality.value)

    def _planetary_score(self, p: PanchangSnapshot, rules: ActivityRules) -> float:
        """Mean over the activity's key planets: clear of the Sun, or combust."""
        if p.planets is None or not rules.key_planets:
            return rules.planetary_default
        scores = self.rules.planetary_scores
        sun = p.planets["Sun"]
        values = []
        for planet in rules.key_planets:
            orb = self.rules.combustion_orbs.get(planet)
            if orb is not None and is_combust(p.planets[planet], sun, orb):
                values.append(scores.combust)
            else:
                values.append(scores.clear)
        return sum(values) / len(values)

    # ── Scoring ─────────────────────────────────────────────────

    def score(self, snapshot: PanchangSnapshot, activity: str = "general",
              time_slot: Optional[TimeSlot] = None) -> MuhuratScore:
        rule_set, rules = self.rules.for_activity(activity)
        factor_scores = self.rules.factor_scores

        verdicts = self._verdicts(snapshot, rules)
        components = {name: getattr(factor_scores, v) for name, v in verdicts.items()}
        components["muhurat"] = self._time_slot_score(time_slot, rule_set)
        components["planetary"] = self._planetary_score(snapshot, rules)

        base = sum(self.rules.weights[f] * components[f] for f in FACTORS)

        total = base
        penalties = []
        if snapshot.nakshatra.gand_mula:
            factor = self.rules.penalties.gand_mula
            total *= factor
            penalties.append(f"Gand Mula Nakshatra: {snapshot.nakshatra.name} (x{factor})")
        if time_slot is not None and time_slot.in_rahu_kaal:
            factor = self.rules.penalties.rahu_kaal
            total *= factor
            penalties.append(f"Rahu Kaal during {time_slot.name} muhurta (x{factor})")
        total = min(max(total, 0.0), 1.0)

        # Strengths and weaknesses follow each limb's own quality, not the activity verdict
        limbs = {
            "tithi": snapshot.tithi,
            "nakshatra": snapshot.nakshatra,
            "yoga": snapshot.yoga,
            "karana": snapshot.karana,
            "vara": snapshot.vara,
        }
        strengths = tuple(f"{STRENGTH_LABELS[f]}: {limb.name}"
                          for f, limb in limbs.items() if limb.quality == Quality.AUSPICIOUS)
        weaknesses = tuple(f"{WEAKNESS_LABELS[f]}: {limb.name}"
                           for f, limb in limbs.items() if limb.quality == Quality.INAUSPICIOUS)

        log.debug("Muhurat %s (rules %s): base=%.4f total=%.4f", activity, rule_set, base, total)
        return MuhuratScore(
            total_score=total,
            base_score=base,
            component_scores=components,
            grade=self.rules.grade_for(total),
            recommendation=recommendation(total, activity),
            strengths=strengths,
            weaknesses=weaknesses,
            penalties=tuple(penalties),
            activity=activity,
            rule_set=rule_set,
        )


def grade_for(score: float, rules: Optional[RuleBook] = None) -> str:
    return (rules if rules is not None else default_rulebook()).grade_for(score)


def suggest_remedies(snapshot: PanchangSnapshot) -> list:
    """Traditional remedies for the weak limbs of the day."""
    remedies = []
    if snapshot.tithi.quality != Quality.AUSPICIOUS:
        remedies.append("Perform Ganesh Puja before commencing activity")
    if snapshot.nakshatra.quality != Quality.AUSPICIOUS:
        remedies.append(f"Chant protective mantras for {snapshot.nakshatra.lord}, "
                        f"lord of {snapshot.nakshatra.name}")
    if snapshot.yoga.quality != Quality.AUSPICIOUS:
        remedies.append("Perform general auspicious ceremonies")
    if snapshot.vara.quality != Quality.AUSPICIOUS:
        remedies.append(f"Offer prayers to {snapshot.vara.lord}, ruler of {snapshot.vara.name}")
    remedies.append("Consult with experienced priest or astrologer")
    remedies.append("Consider alternative auspicious timing")
    return remedies


def compare_scores(first: MuhuratScore, second: MuhuratScore) -> dict:
    diff = first.total_score - second.total_score
    best = max(first.total_score, second.total_score)
    return {
        "better": "first" if diff > 0 else "second" if diff < 0 else "equal",
        "difference": abs(diff),
        "percentage": abs(diff) / best * 100.0 if best > 0 else 0.0,
    }
