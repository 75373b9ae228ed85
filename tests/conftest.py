# tests/conftest.py
"""
Pytest configuration for the Panchang Engine suite.

- Registers Hypothesis profiles for local dev and CI.
- Provides shared rule-book, scorer and snapshot fixtures.
"""

import os
from datetime import date

import pytest
from hypothesis import HealthCheck, settings

from panchang_engine.core.muhurat import MuhuratScorer
from panchang_engine.core.panchang import classify
from panchang_engine.core.rules import default_rulebook


# ──────────────────────────────────────────────────────────────────────────────
# Hypothesis profiles
# ──────────────────────────────────────────────────────────────────────────────
settings.register_profile(
    "dev",
    settings(deadline=None, max_examples=60, suppress_health_check=[HealthCheck.too_slow]),
)
settings.register_profile(
    "ci",
    settings(deadline=None, max_examples=200, suppress_health_check=[HealthCheck.too_slow]),
)

_profile = "ci" if os.getenv("CI") else os.getenv("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(_profile)


def pytest_report_header(config) -> str:
    return f"Hypothesis profile: '{_profile}'"


# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def rules():
    return default_rulebook()


@pytest.fixture(scope="session")
def scorer(rules):
    return MuhuratScorer(rules)


@pytest.fixture
def wednesday_snapshot():
    # Sun 0°, Moon 50° → Shukla Panchami, Rohini, Yoga Saubhagya; 2024-02-14 is a Wednesday
    return classify(0.0, 50.0, date(2024, 2, 14))
