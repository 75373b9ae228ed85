"""
rules.py
========
Muhurat rule book: factor weights, factor scores, grade bands, penalties
and the per-activity ideal/avoid sets.

The rule book is YAML (``data/muhurat_rules.yaml``) validated into frozen
pydantic models. It is loaded once and passed into the scorer, so an
alternative rule set can be swapped in without touching the scoring code.

Usage:
    from panchang_engine.core.rules import default_rulebook, load_rulebook

    rules = default_rulebook()                 # packaged file, or $PANCHANG_RULES
    custom = load_rulebook("my_rules.yaml")
"""

import logging
import math
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .ephemeris import PLANETS
from .errors import ConfigurationError
from .tables import KARANAS

log = logging.getLogger(__name__)

RULES_ENV = "PANCHANG_RULES"
DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / "muhurat_rules.yaml"

FACTORS = ("tithi", "nakshatra", "yoga", "karana", "vara", "muhurat", "planetary")
FALLBACK_ACTIVITY = "general"


# ── Models ─────────────────────────────────────────────────────

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NumberRule(_Frozen):
    ideal: FrozenSet[int] = Field(default_factory=frozenset)
    avoid: FrozenSet[int] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _disjoint(self) -> "NumberRule":
        overlap = self.ideal & self.avoid
        if overlap:
            raise ValueError(f"numbers both ideal and avoided: {sorted(overlap)}")
        return self

    def check_bounds(self, label: str, low: int, high: int):
        bad = sorted(n for n in self.ideal | self.avoid if not low <= n <= high)
        if bad:
            raise ValueError(f"{label} outside {low}..{high}: {bad}")


class NameRule(_Frozen):
    ideal: FrozenSet[str] = Field(default_factory=frozenset)
    avoid: FrozenSet[str] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _known_names(self) -> "NameRule":
        unknown = sorted((self.ideal | self.avoid) - set(KARANAS))
        if unknown:
            raise ValueError(f"unknown karana names: {unknown}")
        overlap = self.ideal & self.avoid
        if overlap:
            raise ValueError(f"karanas both ideal and avoided: {sorted(overlap)}")
        return self


class ActivityRules(_Frozen):
    description:       str = ""
    tithis:            NumberRule = Field(default_factory=NumberRule)
    nakshatras:        NumberRule = Field(default_factory=NumberRule)
    yogas:             NumberRule = Field(default_factory=NumberRule)
    karanas:           NameRule = Field(default_factory=NameRule)
    varas:             NumberRule = Field(default_factory=NumberRule)
    key_planets:       Tuple[str, ...] = ()
    planetary_default: float = Field(0.6, ge=0.0, le=1.0)

    @field_validator("key_planets")
    @classmethod
    def _known_planets(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [p for p in v if p not in PLANETS or p == "Sun"]
        if unknown:
            raise ValueError(f"key_planets must be non-solar bodies, got {unknown}")
        return v

    @model_validator(mode="after")
    def _bounds(self) -> "ActivityRules":
        self.tithis.check_bounds("tithis", 1, 30)
        self.nakshatras.check_bounds("nakshatras", 1, 27)
        self.yogas.check_bounds("yogas", 1, 27)
        self.varas.check_bounds("varas", 1, 7)
        return self


class FactorScores(_Frozen):
    ideal:        float = Field(1.0, ge=0.0, le=1.0)
    avoid:        float = Field(0.2, ge=0.0, le=1.0)
    auspicious:   float = Field(0.8, ge=0.0, le=1.0)
    neutral:      float = Field(0.6, ge=0.0, le=1.0)
    inauspicious: float = Field(0.3, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _ordered(self) -> "FactorScores":
        if not self.ideal > self.avoid:
            raise ValueError("ideal factor score must exceed avoid")
        return self


class GradeBand(_Frozen):
    minimum: float = Field(..., ge=0.0, le=1.0)
    grade:   str


class Penalties(_Frozen):
    gand_mula: float = Field(0.3, ge=0.0, le=1.0)
    rahu_kaal: float = Field(0.7, ge=0.0, le=1.0)


class PlanetaryScores(_Frozen):
    clear:   float = Field(1.0, ge=0.0, le=1.0)
    combust: float = Field(0.3, ge=0.0, le=1.0)


class RuleBook(_Frozen):
    weights:          Mapping[str, float]
    factor_scores:    FactorScores = Field(default_factory=FactorScores)
    grades:           Tuple[GradeBand, ...]
    penalties:        Penalties = Field(default_factory=Penalties)
    muhurat_default:  float = Field(0.7, ge=0.0, le=1.0)
    combustion_orbs:  Mapping[str, float] = Field(default_factory=dict, validate_default=True)
    planetary_scores: PlanetaryScores = Field(default_factory=PlanetaryScores)
    activities:       Mapping[str, ActivityRules]

    @field_validator("weights")
    @classmethod
    def _weights(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        if set(v) != set(FACTORS):
            raise ValueError(f"weights must name exactly {list(FACTORS)}, got {sorted(v)}")
        if any(w < 0 for w in v.values()):
            raise ValueError("weights must be non-negative")
        total = sum(v.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0, got {total}")
        return MappingProxyType(dict(v))

    @field_validator("grades")
    @classmethod
    def _grades(cls, v: Tuple[GradeBand, ...]) -> Tuple[GradeBand, ...]:
        if not v:
            raise ValueError("at least one grade band is required")
        minimums = [band.minimum for band in v]
        if any(a <= b for a, b in zip(minimums, minimums[1:])):
            raise ValueError(f"grade minimums must be strictly descending, got {minimums}")
        if minimums[-1] != 0.0:
            raise ValueError("the last grade band must start at 0.0")
        return v

    @field_validator("combustion_orbs")
    @classmethod
    def _orbs(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        for planet, orb in v.items():
            if planet not in PLANETS:
                raise ValueError(f"unknown planet in combustion_orbs: {planet!r}")
            if not 0.0 <= orb <= 180.0:
                raise ValueError(f"combustion orb for {planet} must be within [0, 180]")
        return MappingProxyType(dict(v))

    @field_validator("activities")
    @classmethod
    def _activities(cls, v: Mapping[str, ActivityRules]) -> Mapping[str, ActivityRules]:
        v = {name.lower(): rules for name, rules in v.items()}
        if FALLBACK_ACTIVITY not in v:
            raise ValueError(f"a {FALLBACK_ACTIVITY!r} activity is required as fallback")
        return MappingProxyType(v)

    def for_activity(self, activity: str) -> Tuple[str, ActivityRules]:
        """
        Rule set for an activity, as (rule_set_name, rules).
        Unrecognised activities use the ``general`` set.
        """
        key = str(activity).strip().lower()
        if key in self.activities:
            return key, self.activities[key]
        log.debug("No muhurat rules for activity %r, using %r", activity, FALLBACK_ACTIVITY)
        return FALLBACK_ACTIVITY, self.activities[FALLBACK_ACTIVITY]

    def grade_for(self, score: float) -> str:
        for band in self.grades:
            if score >= band.minimum:
                return band.grade
        return self.grades[-1].grade


# ── Loading ────────────────────────────────────────────────────

def parse_rulebook(data: dict, source: str = "<dict>") -> RuleBook:
    try:
        return RuleBook.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"invalid muhurat rule book {source}: {e}") from e


def load_rulebook(path: Optional[str] = None) -> RuleBook:
    """
    Load a rule book from ``path``, else from $PANCHANG_RULES, else the
    packaged default.
    """
    path = Path(path or os.getenv(RULES_ENV) or DEFAULT_RULES_PATH)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"cannot read muhurat rule book {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"muhurat rule book {path} must be a mapping")

    rules = parse_rulebook(data, source=str(path))
    log.debug("Loaded muhurat rule book %s (%d activities)", path, len(rules.activities))
    return rules


@lru_cache(maxsize=1)
def default_rulebook() -> RuleBook:
    return load_rulebook()
