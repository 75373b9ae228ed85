"""
test_rules.py
=============
Rule book loading and validation.
"""

import copy
import math

import pytest
import yaml

from panchang_engine.core import tables
from panchang_engine.core.ayanamsa import AYANAMSA
from panchang_engine.core.errors import ConfigurationError
from panchang_engine.core.panchang import Quality, compute_tithi
from panchang_engine.core.rules import (
    DEFAULT_RULES_PATH, FACTORS, RULES_ENV, default_rulebook, load_rulebook, parse_rulebook,
)


@pytest.fixture
def raw_rules():
    with open(DEFAULT_RULES_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def test_packaged_rule_book_is_valid(rules):
    assert set(rules.weights) == set(FACTORS)
    assert math.isclose(sum(rules.weights.values()), 1.0)
    assert set(rules.activities) == {"marriage", "business", "travel", "education", "health", "general"}
    assert rules.penalties.gand_mula == 0.3
    assert rules.grades[-1].minimum == 0.0


def test_default_rulebook_is_cached():
    assert default_rulebook() is default_rulebook()


def test_rule_book_is_frozen(rules):
    with pytest.raises(Exception):
        rules.muhurat_default = 0.1


def test_rule_book_mappings_are_read_only():
    rules = default_rulebook()
    with pytest.raises(TypeError):
        rules.weights["tithi"] = 0.9
    with pytest.raises(TypeError):
        rules.combustion_orbs["Venus"] = 0.0
    with pytest.raises(AttributeError):
        rules.activities.pop("travel")
    again = default_rulebook()
    assert again.weights["tithi"] == 0.20
    assert "travel" in again.activities


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        tables.AUSPICIOUS_TITHIS["Shukla"] = frozenset()
    with pytest.raises(TypeError):
        tables.UNSUITABLE_MUHURTA_ACTIVITIES[3] = ("marriage",)
    with pytest.raises(TypeError):
        AYANAMSA["lahiri"]["rate"] = 0.0
    assert compute_tithi(0.0, 14.0).quality == Quality.AUSPICIOUS


def test_for_activity_fallback(rules):
    name, general = rules.for_activity("seed-sowing")
    assert name == "general"
    assert general is rules.activities["general"]


@pytest.mark.parametrize("mutate", [
    lambda d: d["weights"].update(tithi=0.5),                       # no longer sums to 1
    lambda d: d["weights"].pop("planetary"),
    lambda d: d["grades"].reverse(),
    lambda d: d["grades"].pop(),                                     # last band not 0.0
    lambda d: d["activities"].pop("general"),
    lambda d: d["activities"]["marriage"]["nakshatras"]["avoid"].append(4),    # also ideal
    lambda d: d["activities"]["travel"]["tithis"]["ideal"].append(31),
    lambda d: d["activities"]["business"]["karanas"]["ideal"].append("Gara"),
    lambda d: d["activities"]["health"]["key_planets"].append("Sun"),
    lambda d: d["penalties"].update(gand_mula=1.5),
    lambda d: d.update(unexpected=True),
])
def test_invalid_rule_books_raise(raw_rules, mutate):
    data = copy.deepcopy(raw_rules)
    mutate(data)
    with pytest.raises(ConfigurationError):
        parse_rulebook(data)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_rulebook(str(tmp_path / "nope.yaml"))


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("weights: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_rulebook(str(path))


def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_rulebook(str(path))


def test_environment_override(tmp_path, monkeypatch, raw_rules):
    data = copy.deepcopy(raw_rules)
    data["penalties"]["gand_mula"] = 0.5
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    monkeypatch.setenv(RULES_ENV, str(path))
    assert load_rulebook().penalties.gand_mula == 0.5
